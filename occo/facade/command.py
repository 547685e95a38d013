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

""" Command lookup.

A command record holds its help metadata under the ``help`` key, and one
sub-record per rank:

.. code-block:: yaml

    power-on:
        help:
            summary: Power on the node
        default:
            script: ipmitool -H {{ bmc }} power on
            variables: {bmc: localhost}
        gpu:
            script: ...
"""

__all__ = ['CommandFacade', 'DummyCommandFacade', 'StandaloneCommandFacade']

import logging
import occo.facade.factory as factory
from occo.facade.model import Command, Script
from occo.facade.node import normalize_keys

log = logging.getLogger('occo.facade.command')

HELP_KEY = 'help'

class CommandFacade(factory.MultiBackend):
    """
    Abstract interface for command lookup.

    This is an :class:`abstract factory <occo.facade.factory.MultiBackend>`
    class.
    """
    def find_by_name(self, name):
        """
        Query for a command by its name alone.

        :param str name: The name of the command.
        :return: The :class:`~occo.facade.model.Command`, or :data:`None` if
            the command is missing.
        """
        raise NotImplementedError()

    def index_all(self):
        """
        Query for all the available commands.

        :return: The list of :class:`~occo.facade.model.Command` objects.
        """
        raise NotImplementedError()

@factory.register(CommandFacade, 'dummy')
class DummyCommandFacade(CommandFacade):
    """
    Implementation of :class:`CommandFacade` that knows no commands.
    """
    def find_by_name(self, name):
        return None

    def index_all(self):
        return []

@factory.register(CommandFacade, 'standalone')
class StandaloneCommandFacade(CommandFacade):
    """
    Implementation of :class:`CommandFacade` backed by in-memory data.

    Iterating over this object yields the resolved
    :class:`~occo.facade.model.Command` objects.

    :param dict data: Command records keyed by command name. The
        ``__meta__`` entry is ignored.
    """
    def __init__(self, data=None):
        self.data = normalize_keys(data)
        log.debug('Loaded %d command(s)', len(self.data))

    def find_by_name(self, name):
        """
        Implementation of :meth:`CommandFacade.find_by_name`.
        """
        name = str(name)
        if name not in self.data:
            log.debug('Command %r not found', name)
            return None

        record = dict((str(k), v)
                      for k, v in (self.data[name] or dict()).items())
        # ``name`` and ``scripts`` are set by the record itself
        help = dict((str(k), v)
                    for k, v in (record.pop(HELP_KEY, None) or dict()).items()
                    if str(k) not in ('name', 'scripts'))

        scripts = dict()
        for rank, attrs in record.items():
            attrs = attrs or dict()
            scripts[rank] = Script(rank=rank,
                                   body=attrs.get('script'),
                                   variables=attrs.get('variables'))
        return Command(name, scripts=scripts, **help)

    def index_all(self):
        """
        Implementation of :meth:`CommandFacade.index_all`.
        """
        return list(self)

    def __iter__(self):
        for name in list(self.data):
            yield self.find_by_name(name)

    def __len__(self):
        return len(self.data)
