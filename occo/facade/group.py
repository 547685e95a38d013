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

""" Group lookup.

A group is resolved from its name: the :class:`ExplodingGroupFacade` expands
the name as a group expression (see :mod:`occo.facade.expansion`) and looks
up each resulting node name through a node lookup collaborator.
"""

__all__ = ['GroupFacade', 'DummyGroupFacade', 'ExplodingGroupFacade']

import logging
import occo.facade.factory as factory
from occo.facade.exceptions import ConfigurationError
from occo.facade.expansion import explode_names
from occo.facade.model import Group

log = logging.getLogger('occo.facade.group')

class GroupFacade(factory.MultiBackend):
    """
    Abstract interface for group lookup.

    This is an :class:`abstract factory <occo.facade.factory.MultiBackend>`
    class.

    :param node_lookup: The object used to resolve node names; anything
        implementing :meth:`~occo.facade.node.NodeFacade.find_by_name`.
        Backends not resolving nodes ignore it.
    """
    def __init__(self, node_lookup=None):
        self.node_lookup = node_lookup

    def find_by_name(self, name):
        """
        Query for a group by its name alone.

        :param str name: The name of the group.
        :return: The :class:`~occo.facade.model.Group` containing the nodes,
            or :data:`None` if the name cannot be resolved.
        """
        raise NotImplementedError()

    def index_all(self):
        """
        Query for all the statically available groups. Groups that can be
        resolved by :meth:`find_by_name` are not necessarily listed.

        :return: The list of static :class:`~occo.facade.model.Group`
            objects.
        """
        raise NotImplementedError()

@factory.register(GroupFacade, 'dummy')
class DummyGroupFacade(GroupFacade):
    """
    Implementation of :class:`GroupFacade` that knows no groups.
    """
    def find_by_name(self, name):
        return None

    def index_all(self):
        return []

@factory.register(GroupFacade, 'exploding')
class ExplodingGroupFacade(GroupFacade):
    """
    Implementation of :class:`GroupFacade` resolving group expressions.

    Node names that cannot be resolved by ``node_lookup`` are left out of the
    group.

    :raises ConfigurationError: if ``node_lookup`` is not given.
    """
    def __init__(self, node_lookup=None):
        if node_lookup is None:
            raise ConfigurationError(
                'The exploding group backend requires a node lookup')
        super(ExplodingGroupFacade, self).__init__(node_lookup)

    def find_by_name(self, name):
        """
        Implementation of :meth:`GroupFacade.find_by_name`.
        """
        name = str(name)
        node_names = explode_names(name)
        if node_names is None:
            log.debug('Invalid group expression: %r', name)
            return None

        nodes = list()
        for node_name in node_names:
            node = self.node_lookup.find_by_name(node_name)
            if node is None:
                log.debug('Skipping unresolved node %r of group %r',
                          node_name, name)
            else:
                nodes.append(node)
        return Group(name=name, nodes=nodes)

    def index_all(self):
        """
        Implementation of :meth:`GroupFacade.index_all`.

        Group expressions cannot be enumerated, so there are no static
        groups.
        """
        return []
