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

""" Domain objects returned by the facades.

These objects are created by the facade backends for each lookup and are not
modified afterwards. Two objects built from the same data compare equal.
"""

__all__ = ['Node', 'Group', 'Script', 'Command']

import copy
import jinja2

DEFAULT_RANK = 'default'

class _Value(object):
    """Structural equality over the fields listed in ``_fields``."""
    _fields = ()

    def _key(self):
        return tuple(getattr(self, f) for f in self._fields)

    def __eq__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return self._key() == other._key()

    def __ne__(self, other):
        result = self.__eq__(other)
        return result if result is NotImplemented else not result

    __hash__ = None

    def __repr__(self):
        return '{0}({1})'.format(
            self.__class__.__name__,
            ', '.join('{0}={1!r}'.format(f, getattr(self, f))
                      for f in self._fields))

class Node(_Value):
    """
    A single node.

    :param str name: The name of the node.
    :param dict params: Arbitrary parameters of the node.
    :param list ranks: The ranks of the node, most specific first. A single
        rank may be given as a string.
    """
    _fields = ('name', 'params', 'ranks')

    def __init__(self, name, params=None, ranks=None):
        self._name = name
        self._params = copy.deepcopy(dict(params or dict()))
        if isinstance(ranks, str):
            ranks = [ranks]
        self._ranks = tuple(ranks or ())

    @property
    def name(self):
        return self._name
    @property
    def params(self):
        return copy.deepcopy(self._params)
    @property
    def ranks(self):
        return list(self._ranks)

class Group(_Value):
    """
    A set of nodes, resolved from a group name.

    :param str name: The group name as it was queried (unexpanded).
    :param list nodes: The member :class:`Node` objects, in expansion order.
    """
    _fields = ('name', 'nodes')

    def __init__(self, name, nodes=None):
        self._name = name
        self._nodes = tuple(nodes or ())

    @property
    def name(self):
        return self._name
    @property
    def nodes(self):
        return list(self._nodes)

    def __iter__(self):
        return iter(self._nodes)

    def __len__(self):
        return len(self._nodes)

class Script(_Value):
    """
    The implementation of a command for a given rank.

    :param str rank: The rank this script belongs to.
    :param str body: The script text; a Jinja2 template.
    :param dict variables: Default values of the template variables.
    """
    _fields = ('rank', 'body', 'variables')

    def __init__(self, rank, body=None, variables=None):
        self._rank = rank
        self._body = body
        self._variables = dict(variables or dict())

    @property
    def rank(self):
        return self._rank
    @property
    def body(self):
        return self._body
    @property
    def variables(self):
        return dict(self._variables)

    def render(self, **overrides):
        """
        Render the body as a Jinja2 template. The variables of the script
        are used as template data, updated with ``overrides``.
        """
        template_data = self.variables
        template_data.update(overrides)
        return jinja2.Template(self._body or '').render(**template_data)

class Command(_Value):
    """
    A command with rank-specific implementations.

    :param str name: The name of the command.
    :param dict scripts: :class:`Script` objects keyed by rank.
    :param help: The help metadata of the command (``summary``,
        ``description``, and anything else the data source provides).
    """
    _fields = ('name', 'scripts', 'help')

    def __init__(self, name, scripts=None, **help):
        self._name = name
        self._scripts = dict(scripts or dict())
        self._help = help

    @property
    def name(self):
        return self._name
    @property
    def scripts(self):
        return dict(self._scripts)
    @property
    def help(self):
        return dict(self._help)
    @property
    def summary(self):
        return self._help.get('summary')
    @property
    def description(self):
        return self._help.get('description')

    def script_for(self, ranks=()):
        """
        Select the script for a node having the given ``ranks``.

        The first rank (in the given order) that this command implements is
        chosen; otherwise the ``default`` rank. Returns :data:`None` if
        neither exists.
        """
        for rank in list(ranks) + [DEFAULT_RANK]:
            if rank in self._scripts:
                return self._scripts[rank]
        return None
