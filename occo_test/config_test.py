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

import io
import unittest
from common import *
import occo.facade.config as config
from occo.facade.exceptions import ConfigurationError

class ConfigTest(unittest.TestCase):
    def test_test_config(self):
        self.assertIn('facades', cfg)
        self.assertEqual(cfg.logging['version'], 1)
        self.assertIsNone(cfg.nonexistent)
        self.assertEqual(cfg.get('nonexistent', 'x'), 'x')
    def test_stream(self):
        c = config.load_config(io.StringIO('a: 1\nb: [x, y]\n'))
        self.assertEqual(c.a, 1)
        self.assertEqual(c['b'], ['x', 'y'])
    def test_empty(self):
        c = config.load_config(io.StringIO(''))
        self.assertIsNone(c.facades)
        self.assertFalse(config.build_registry(c).node.configured)
    def test_not_a_mapping(self):
        self.assertRaises(ConfigurationError, config.load_config,
                          io.StringIO('- a\n- b\n'))
    def test_parse_error(self):
        self.assertRaises(ConfigurationError, config.load_config,
                          io.StringIO('a: [1, 2\n'))

class BootstrapTest(unittest.TestCase):
    def setUp(self):
        self.registry = config.build_registry(cfg)
    def test_meta_stripped(self):
        self.assertEqual([n.name for n in self.registry.node.index_all()],
                         ['login1', 'node01', 'node02', 'node04'])
    def test_group(self):
        group = self.registry.group.find_by_name('node0[1-4],login1')
        self.assertEqual(group.name, 'node0[1-4],login1')
        self.assertEqual([n.name for n in group],
                         ['node01', 'node02', 'node04', 'login1'])
    def test_command_for_node(self):
        node = self.registry.node.find_by_name('node01')
        cmd = self.registry.command.find_by_name('power-on')
        self.assertEqual(cmd.summary, 'Power on the node')
        script = cmd.script_for(node.ranks)
        self.assertEqual(script.rank, 'gpu')
        self.assertEqual(script.render(name=node.name), 'gpu-power on node01')
    def test_default_script(self):
        node = self.registry.node.find_by_name('node02')
        script = self.registry.command.find_by_name('power-on') \
            .script_for(node.ranks)
        self.assertEqual(script.render(), 'ipmitool -H localhost power on')
        self.assertEqual(script.render(bmc=node.params['ip']),
                         'ipmitool -H 10.10.0.2 power on')

if __name__ == '__main__':
    unittest.main()
