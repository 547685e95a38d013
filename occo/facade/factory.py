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

""" Abstract factory for facade backends.

Each capability contract (e.g. :class:`~occo.facade.node.NodeFacade`) is
derived from :class:`MultiBackend`. Its implementations are registered with
:func:`register` under a *protocol* identifier, and are instantiated through
the contract class:

.. code-block:: python

    @factory.register(NodeFacade, 'standalone')
    class StandaloneNodeFacade(NodeFacade):
        ...

    nodes = NodeFacade.instantiate('standalone', data)
    nodes = NodeFacade.from_config(dict(protocol='standalone', data=data))

The set of backends is closed at import time; no classes are synthesized at
run time.
"""

__all__ = ['MultiBackend', 'register']

import logging
from occo.facade.exceptions import ConfigurationError

log = logging.getLogger('occo.facade.factory')

class MultiBackend(object):
    """
    Base class of abstract factory classes.

    Registered backends are stored in the ``backends`` dictionary of the
    abstract class itself, so different abstract classes can use the same
    protocol identifiers independently.
    """

    @classmethod
    def _backends(cls):
        for klass in cls.__mro__:
            if 'backends' in klass.__dict__:
                return klass.__dict__['backends']
        return dict()

    @classmethod
    def protocols(cls):
        """The list of protocol identifiers registered for this class."""
        return sorted(cls._backends().keys())

    @classmethod
    def instantiate(cls, protocol, *args, **kwargs):
        """
        Create an instance of the backend registered as ``protocol``.

        :raises ConfigurationError: if no backend has been registered with
            the given identifier.
        """
        backends = cls._backends()
        if protocol not in backends:
            raise ConfigurationError(
                'Unknown {0} protocol: {1!r} (available: {2})'.format(
                    cls.__name__, protocol, ', '.join(cls.protocols())))
        log.debug('Instantiating %s backend %r', cls.__name__, protocol)
        return backends[protocol](*args, **kwargs)

    @classmethod
    def from_config(cls, config, **extra_kwargs):
        """
        Create a backend from a configuration section.

        :param dict config: The ``protocol`` key selects the backend, all
            other keys are passed to its constructor as keyword arguments.
        :param extra_kwargs: Additional keyword arguments supplied by the
            caller (not by the configuration).
        """
        if not isinstance(config, dict):
            raise ConfigurationError(
                'Invalid {0} configuration: {1!r}'.format(
                    cls.__name__, config))
        kwargs = dict(config)
        protocol = kwargs.pop('protocol', None)
        if protocol is None:
            raise ConfigurationError(
                'Missing protocol in {0} configuration'.format(cls.__name__))
        kwargs.update(extra_kwargs)
        return cls.instantiate(protocol, **kwargs)

def register(target_class, protocol):
    """
    Class decorator registering the decorated class as the backend of
    ``target_class`` identified by ``protocol``.
    """
    def decorator(cls):
        if 'backends' not in target_class.__dict__:
            target_class.backends = dict()
        target_class.backends[protocol] = cls
        cls.protocol = protocol
        return cls
    return decorator
