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

""" YAML configuration of the facade layer.

The configuration is a YAML mapping. The ``facades`` section is passed to
:meth:`~occo.facade.registry.FacadeRegistry.from_config`; the ``logging``
section, if present, is a :func:`logging.config.dictConfig` dictionary.

.. code-block:: yaml

    facades:
        node:
            protocol: standalone
            data:
                node01: {ip: 10.0.0.1}
        group:
            protocol: exploding
    logging:
        version: 1
"""

__all__ = ['Config', 'load_config', 'setup_logging', 'build_registry']

import io
import logging
import logging.config
from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError
from occo.facade.exceptions import ConfigurationError
from occo.facade.registry import FacadeRegistry

log = logging.getLogger('occo.facade.config')

class Config(object):
    """
    Parsed configuration. Top-level keys are accessible both as items and
    as attributes; missing attributes are :data:`None`.
    """
    def __init__(self, data):
        self._data = data

    def __getattr__(self, name):
        if name.startswith('_'):
            raise AttributeError(name)
        return self._data.get(name)

    def __getitem__(self, key):
        return self._data[key]

    def __contains__(self, key):
        return key in self._data

    def get(self, key, default=None):
        return self._data.get(key, default)

    def setup_logging(self):
        setup_logging(self)

def _to_builtin(data):
    # ruamel returns its own container types; backends expect plain ones
    if isinstance(data, dict):
        return dict((k, _to_builtin(v)) for k, v in data.items())
    elif isinstance(data, list):
        return [_to_builtin(i) for i in data]
    return data

def load_config(source):
    """
    Load the configuration.

    :param source: A file name, or a stream to read the YAML document from.
    :rtype: :class:`Config`
    :raises ConfigurationError: if the document cannot be parsed or is not
        a mapping.
    """
    yaml = YAML(typ='safe')
    try:
        if isinstance(source, str):
            log.debug('Loading configuration from %r', source)
            with io.open(source) as f:
                data = yaml.load(f)
        else:
            data = yaml.load(source)
    except YAMLError as ex:
        raise ConfigurationError('Cannot parse configuration: {0}'.format(ex))

    if data is None:
        data = dict()
    if not isinstance(data, dict):
        raise ConfigurationError(
            'The configuration must be a mapping, not {0}'.format(
                type(data).__name__))
    return Config(_to_builtin(data))

def setup_logging(cfg):
    """Apply the ``logging`` section of ``cfg``, if there is one."""
    if cfg.logging:
        logging.config.dictConfig(cfg.logging)
        log.debug('Logging configured')

def build_registry(cfg):
    """
    Create a :class:`~occo.facade.registry.FacadeRegistry` from the
    ``facades`` section of ``cfg``.
    """
    return FacadeRegistry.from_config(cfg.facades or dict())
