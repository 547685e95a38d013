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

""" Expansion of group expressions into node names.

A group expression is a comma-separated list of segments. Each segment is
either a plain name, or a *leader* followed by a single numeric range:

.. code-block:: none

    login1,node0[1-3]   ->  login1 node01 node02 node03

Trailing zeros of the leader give the width of the generated indices: the
leader ``node00`` with the range ``[1-3]`` yields ``node001`` to ``node003``.
Zeros inside the bounds themselves are ignored.
"""

__all__ = ['explode_names']

import re

EXPLODE_REGEX = re.compile(
    r'(?P<leader>[A-Za-z0-9]+)(\[(?P<low>[0-9]+)-(?P<high>[0-9]+)\])?')
PADDING_REGEX = re.compile(r'0*$')

def explode_segment(match):
    leader, low, high = match.group('leader', 'low', 'high')
    if low is None:
        return [leader]

    max_pads = len(PADDING_REGEX.search(leader).group())
    stripped_leader = leader[:len(leader) - max_pads]

    names = list()
    for index in range(int(low), int(high) + 1):
        pads = max_pads - len(str(index)) + 1
        names.append('{0}{1}{2}'.format(
            stripped_leader, '0' * pads if pads > 0 else '', index))
    return names

def explode_names(expression):
    """
    Expand a group expression into the list of names it denotes.

    Segments are expanded in order, ranges in ascending order; the result is
    neither sorted nor deduplicated. A range whose lower bound is greater
    than its upper bound yields no names.

    :param str expression: The group expression.
    :return: The list of names, or :data:`None` if any segment of the
        expression is malformed.
    """
    parts = [p for p in expression.split(',') if p]
    matches = [EXPLODE_REGEX.fullmatch(p) for p in parts]
    if not all(matches):
        return None

    names = list()
    for match in matches:
        names.extend(explode_segment(match))
    return names
