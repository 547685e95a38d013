### Copyright 2014, MTA SZTAKI, www.sztaki.hu
###
### Licensed under the Apache License, Version 2.0 (the "License");
### you may not use this file except in compliance with the License.
### You may obtain a copy of the License at
###
###    http://www.apache.org/licenses/LICENSE-2.0
###
### Unless required by applicable law or agreed to in writing, software
### distributed under the License is distributed on an "AS IS" BASIS,
### WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
### See the License for the specific language governing permissions and
### limitations under the License.

""" Binding of capabilities to their active backends.

A :class:`Facade` holds the single active backend of one capability and
forwards every call to it. A :class:`FacadeRegistry` groups the facades of
all capabilities; it is created once when the application is bootstrapped
and then passed to whatever needs lookups:

.. code-block:: python

    registry = FacadeRegistry.from_config(cfg.facades)
    group = registry.group.find_by_name('node0[1-4]')

The registry does not provide any locking: backends are expected to be set
during bootstrap, before concurrent use.
"""

__all__ = ['Facade', 'FacadeRegistry']

import logging
from occo.facade.command import CommandFacade
from occo.facade.exceptions import ConfigurationError, UnconfiguredFacadeError
from occo.facade.group import GroupFacade
from occo.facade.node import NodeFacade

log = logging.getLogger('occo.facade.registry')

class Facade(object):
    """
    Stable front of a capability, delegating to its active backend.

    :param str capability: Name of the capability (used in error messages).
    :param contract: The abstract class the backends must implement.
    :param instance: Optional; the initial active backend.
    """
    def __init__(self, capability, contract, instance=None):
        self.capability = capability
        self.contract = contract
        self._instance = None
        if instance is not None:
            self.set_instance(instance)

    @property
    def configured(self):
        return self._instance is not None

    @property
    def instance(self):
        """
        The active backend.

        :raises UnconfiguredFacadeError: if no backend has been set.
        """
        if self._instance is None:
            raise UnconfiguredFacadeError(self.capability)
        return self._instance

    def set_instance(self, instance):
        """Set the active backend of this capability."""
        if not isinstance(instance, self.contract):
            raise TypeError(
                '{0!r} does not implement {1}'.format(
                    instance, self.contract.__name__))
        log.debug('Setting %s backend: %r', self.capability, instance)
        self._instance = instance

    def find_by_name(self, name):
        return self.instance.find_by_name(name)

    def index_all(self):
        return self.instance.index_all()

    def __iter__(self):
        return iter(self.instance)

    def __len__(self):
        return len(self.instance)

    def __getattr__(self, name):
        # Only called for attributes not found on the facade itself
        if name.startswith('_'):
            raise AttributeError(name)
        return getattr(self.instance, name)

    def __repr__(self):
        return '<Facade {0}: {1!r}>'.format(self.capability, self._instance)

class FacadeRegistry(object):
    """
    The facades of all capabilities.

    :ivar group: :class:`Facade` of :class:`~occo.facade.group.GroupFacade`.
    :ivar node: :class:`Facade` of :class:`~occo.facade.node.NodeFacade`.
    :ivar command: :class:`Facade` of
        :class:`~occo.facade.command.CommandFacade`.
    """
    contracts = [
        ('node', NodeFacade),
        ('group', GroupFacade),
        ('command', CommandFacade),
    ]

    def __init__(self, node=None, group=None, command=None):
        self.node = Facade('node', NodeFacade, node)
        self.group = Facade('group', GroupFacade, group)
        self.command = Facade('command', CommandFacade, command)

    def backend_kwargs(self, capability):
        """
        Keyword arguments injected into backends created by
        :meth:`from_config`.
        """
        if capability == 'group':
            return dict(node_lookup=self.node)
        return dict()

    def configure(self, config):
        """
        Create and set the backends described by ``config``.

        :param dict config: Optional ``node``, ``group`` and ``command``
            sections, each passed to
            :meth:`~occo.facade.factory.MultiBackend.from_config` of the
            corresponding contract. Missing sections leave the facade
            unconfigured.
        """
        if not isinstance(config, dict):
            raise ConfigurationError(
                'Invalid facade configuration: {0!r}'.format(config))
        unknown = set(config) - set(c for c, _ in self.contracts)
        if unknown:
            raise ConfigurationError(
                'Unknown facade(s) in configuration: {0}'.format(
                    ', '.join(sorted(unknown))))

        for capability, contract in self.contracts:
            section = config.get(capability)
            if section is None:
                log.debug('No backend configured for %s', capability)
                continue
            instance = contract.from_config(
                section, **self.backend_kwargs(capability))
            getattr(self, capability).set_instance(instance)
            log.info('Using %r %s backend', instance.protocol, capability)
        return self

    @classmethod
    def from_config(cls, config):
        """Create a registry configured with :meth:`configure`."""
        return cls().configure(config)
