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

import unittest
from common import *
from occo.facade.model import Node, Group, Script, Command

class NodeTest(unittest.TestCase):
    def test_equality(self):
        self.assertEqual(Node('n', dict(a=1), ['r']), Node('n', dict(a=1), ['r']))
        self.assertNotEqual(Node('n', dict(a=1)), Node('n', dict(a=2)))
        self.assertNotEqual(Node('n'), Group('n'))
    def test_immutable(self):
        node = Node('n', dict(a=1), ['r'])
        self.assertRaises(AttributeError, setattr, node, 'name', 'm')
    def test_input_copied(self):
        params, ranks = dict(a=1), ['r']
        node = Node('n', params, ranks)
        params['a'] = 2
        ranks.append('s')
        self.assertEqual(node.params, dict(a=1))
        self.assertEqual(node.ranks, ['r'])
    def test_repr(self):
        self.assertEqual(repr(Node('n')),
                         "Node(name='n', params={}, ranks=[])")

class GroupTest(unittest.TestCase):
    def test_members(self):
        group = Group('g[1-2]', [Node('g1'), Node('g2')])
        self.assertEqual(len(group), 2)
        self.assertEqual([n.name for n in group], ['g1', 'g2'])
        self.assertEqual(group.nodes, [Node('g1'), Node('g2')])

class ScriptTest(unittest.TestCase):
    def test_render(self):
        script = Script('default', 'echo {{ greeting }} {{ name }}',
                        dict(greeting='hello', name='world'))
        self.assertEqual(script.render(), 'echo hello world')
        self.assertEqual(script.render(name='node01'), 'echo hello node01')
        self.assertEqual(script.variables,
                         dict(greeting='hello', name='world'))
    def test_render_empty(self):
        self.assertEqual(Script('default').render(), '')

class CommandTest(unittest.TestCase):
    def test_help(self):
        cmd = Command('c', summary='s', description='d', extra=1)
        self.assertEqual(cmd.summary, 's')
        self.assertEqual(cmd.description, 'd')
        self.assertEqual(cmd.help, dict(summary='s', description='d', extra=1))
        self.assertEqual(cmd.scripts, {})

if __name__ == '__main__':
    unittest.main()
