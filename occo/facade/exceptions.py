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

""" Exceptions of the facade layer.

Missing entities and malformed group expressions are *not* errors: lookups
return :data:`None` for them. The exceptions here signal faults in the
deployment or in the program itself, and are meant to propagate.
"""

__all__ = ['FacadeError', 'UnconfiguredFacadeError', 'ConfigurationError']

class FacadeError(Exception):
    """Root of the exceptions raised by :mod:`occo.facade`."""
    pass

class UnconfiguredFacadeError(FacadeError):
    """
    Raised when a :class:`~occo.facade.registry.Facade` is used before its
    active backend has been set.

    :param str capability: The name of the unconfigured capability (e.g.
        ``node``).
    """
    def __init__(self, capability):
        super(UnconfiguredFacadeError, self).__init__(
            'No active backend has been configured for the {0!r} '
            'facade'.format(capability))
        self.capability = capability

class ConfigurationError(FacadeError):
    """
    Raised when a backend cannot be created from the given configuration
    (missing or unknown protocol, malformed section).
    """
    pass
