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

import os
import logging
import occo.facade.config as config

def rel_to_file(relpath):
    return os.path.join(os.path.dirname(os.path.abspath(__file__)), relpath)

cfg = config.load_config(rel_to_file('test.yaml'))

config.setup_logging(cfg)

log = logging.getLogger('occo.unittests')

import yaml
dummydata = yaml.safe_load(
    """
    nodes:
        __meta__:
            source: unittest
        cnode0: {ip: 10.0.0.100}
        cnode1: {ip: 10.0.0.1, ranks: [gpu]}
        cnode2: {ip: 10.0.0.2}
        cnode3: {ip: 10.0.0.3, ranks: []}
        cnode10: {ip: 10.0.1.0, ranks: [gpu, compute]}
        node01: {ip: 10.1.0.1}
        node02: {ip: 10.1.0.2}
        node03: {ip: 10.1.0.3}
        1: {ip: 10.2.0.1}
        bare:
    commands:
        __meta__:
            source: unittest
        hostname:
            help:
                summary: Print the host name
                description: Runs hostname(1) on the node.
            default:
                script: hostname
                variables: {}
        reboot:
            help:
                summary: Reboot the node
            default:
                script: "shutdown -r {{ delay }}"
                variables:
                    delay: now
            gpu:
                script: "nvidia-smi -r && shutdown -r {{ delay }}"
                variables:
                    delay: "+1"
        nohelp:
            default:
                script: "true"
    """)

class RecordingNodeLookup(object):
    """Resolves the names in ``known`` and records every query."""
    def __init__(self, known):
        self.known = set(known)
        self.queries = list()
    def find_by_name(self, name):
        from occo.facade.model import Node
        self.queries.append(name)
        if name in self.known:
            return Node(name=name)
        return None
