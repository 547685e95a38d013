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
from occo.facade.expansion import explode_names

class ExplodeNamesTest(unittest.TestCase):
    def test_plain_names(self):
        self.assertEqual(explode_names('a,b,c'), ['a', 'b', 'c'])
    def test_single_name(self):
        self.assertEqual(explode_names('login1'), ['login1'])
    def test_empty_segments_dropped(self):
        self.assertEqual(explode_names(',a,,b,'), ['a', 'b'])
    def test_empty_expression(self):
        self.assertEqual(explode_names(''), [])
    def test_range_without_padding(self):
        self.assertEqual(explode_names('node[1-3]'),
                         ['node1', 'node2', 'node3'])
    def test_range_padded_by_leader(self):
        self.assertEqual(explode_names('node0[1-3]'),
                         ['node01', 'node02', 'node03'])
    def test_padding_grows_with_index_width(self):
        self.assertEqual(explode_names('node0[8-11]'),
                         ['node08', 'node09', 'node10', 'node11'])
    def test_wide_padding(self):
        self.assertEqual(explode_names('node00[9-10]'),
                         ['node009', 'node010'])
    def test_bound_zeros_do_not_pad(self):
        self.assertEqual(explode_names('node[01-03]'),
                         ['node1', 'node2', 'node3'])
    def test_inner_zeros_kept(self):
        self.assertEqual(explode_names('n0de[1-2]'), ['n0de1', 'n0de2'])
        self.assertEqual(explode_names('r10n0[1-2]'), ['r10n01', 'r10n02'])
    def test_all_zero_leader(self):
        self.assertEqual(explode_names('00[1-2]'), ['001', '002'])
        self.assertEqual(explode_names('0[5-5]'), ['05'])
    def test_reversed_range_is_empty(self):
        self.assertEqual(explode_names('x[5-3]'), [])
        self.assertEqual(explode_names('a,x[5-3],b'), ['a', 'b'])
    def test_zero_index(self):
        self.assertEqual(explode_names('node[0-1]'), ['node0', 'node1'])
    def test_order_preserved(self):
        self.assertEqual(explode_names('b[2-3],a,b[1-1],a'),
                         ['b2', 'b3', 'a', 'b1', 'a'])
    def test_malformed(self):
        for expr in ['bad[1-]', 'bad[-1]', 'bad[1-2', 'bad1-2]', '[1-2]',
                     'no-dash', 'node[1-2][3-4]', 'node[1-2-3]',
                     'node[a-b]', 'node[1:2]', 'node 1', 'node[1-2]x']:
            self.assertIsNone(explode_names(expr), expr)
    def test_malformed_segment_invalidates_all(self):
        self.assertIsNone(explode_names('node[1-3],bad[1-]'))
        self.assertIsNone(explode_names('a,b,c!'))
    def test_deterministic(self):
        self.assertEqual(explode_names('n0[1-9],x'), explode_names('n0[1-9],x'))

if __name__ == '__main__':
    unittest.main()
