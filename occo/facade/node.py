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

""" Node lookup.

This module defines the :class:`NodeFacade` contract and its backends. The
backend is selected by its protocol identifier through the
:mod:`Factory <occo.facade.factory>` pattern.
"""

__all__ = ['NodeFacade', 'DummyNodeFacade', 'StandaloneNodeFacade',
           'META_KEY', 'normalize_keys']

import logging
import occo.facade.factory as factory
from occo.facade.model import Node

log = logging.getLogger('occo.facade.node')

META_KEY = '__meta__'
RANKS_KEY = 'ranks'

def normalize_keys(data):
    """
    Return a copy of the mapping ``data`` with all keys converted to
    strings. The reserved :data:`META_KEY` entry is dropped.
    """
    return dict((str(k), v) for k, v in (data or dict()).items()
                if str(k) != META_KEY)

class NodeFacade(factory.MultiBackend):
    """
    Abstract interface for node lookup.

    This is an :class:`abstract factory <occo.facade.factory.MultiBackend>`
    class.
    """
    def find_by_name(self, name):
        """
        Query for a node by its name alone.

        :param str name: The name of the node.
        :return: The :class:`~occo.facade.model.Node`, or :data:`None` if the
            name cannot be resolved.
        """
        raise NotImplementedError()

    def index_all(self):
        """
        Query for all the available nodes.

        :return: The list of :class:`~occo.facade.model.Node` objects.
        """
        raise NotImplementedError()

@factory.register(NodeFacade, 'dummy')
class DummyNodeFacade(NodeFacade):
    """
    Implementation of :class:`NodeFacade` that knows no nodes.
    """
    def find_by_name(self, name):
        return None

    def index_all(self):
        return []

@factory.register(NodeFacade, 'standalone')
class StandaloneNodeFacade(NodeFacade):
    """
    Implementation of :class:`NodeFacade` backed by in-memory data.

    :param dict data: Node records keyed by node name. Each record is a
        mapping of parameters; the ``ranks`` key, if present, holds the list
        of ranks of the node. The ``__meta__`` entry is ignored.
    """
    def __init__(self, data=None):
        self.data = normalize_keys(data)
        log.debug('Loaded %d node(s)', len(self.data))

    def find_by_name(self, name):
        """
        Implementation of :meth:`NodeFacade.find_by_name`.
        """
        name = str(name)
        if name not in self.data:
            log.debug('Node %r not found', name)
            return None
        params = dict((str(k), v)
                      for k, v in (self.data[name] or dict()).items())
        ranks = params.pop(RANKS_KEY, None) or []
        return Node(name=name, params=params, ranks=ranks)

    def index_all(self):
        """
        Implementation of :meth:`NodeFacade.index_all`.
        """
        return [self.find_by_name(name) for name in self.data]
