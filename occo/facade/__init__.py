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

""" Facades for OCCO

This package resolves names of nodes, groups and commands to domain objects
(:mod:`occo.facade.model`). Each of these capabilities is defined by an
abstract interface with interchangeable backends:

- :class:`~occo.facade.node.NodeFacade` (``dummy``, ``standalone``)
- :class:`~occo.facade.group.GroupFacade` (``dummy``, ``exploding``)
- :class:`~occo.facade.command.CommandFacade` (``dummy``, ``standalone``)

The active backends are held by a :class:`~occo.facade.registry.FacadeRegistry`.
"""

from occo.facade.exceptions import *
from occo.facade.model import Node, Group, Script, Command
from occo.facade.expansion import explode_names
from occo.facade.node import NodeFacade
from occo.facade.group import GroupFacade
from occo.facade.command import CommandFacade
from occo.facade.registry import Facade, FacadeRegistry
