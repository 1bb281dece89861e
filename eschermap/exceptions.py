#===============================================================================
#
#  Escher metabolic map rendering
#
#  Copyright (c) 2024  David Brooks
#
#  Licensed under the Apache License, Version 2.0 (the "License");
#  you may not use this file except in compliance with the License.
#  You may obtain a copy of the License at
#
#      http://www.apache.org/licenses/LICENSE-2.0
#
#  Unless required by applicable law or agreed to in writing, software
#  distributed under the License is distributed on an "AS IS" BASIS,
#  WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
#  See the License for the specific language governing permissions and
#  limitations under the License.
#
#===============================================================================

class EscherMapError(ValueError):
    pass

#===============================================================================

class MapDocumentError(EscherMapError):
    """
    The map document doesn't have the shape of an Escher map.
    """
    pass

#===============================================================================

class DanglingNodeError(EscherMapError, KeyError):
    """
    A reaction segment refers to a node that has no position in the map.
    """
    def __init__(self, reaction_id: str, node_id: str):
        super().__init__(f'Reaction {reaction_id} has a segment ending at unknown node {node_id}')
        self.reaction_id = reaction_id
        self.node_id = node_id

    def __str__(self):
        return self.args[0]

#===============================================================================

class InvalidOptionError(EscherMapError):
    pass

#===============================================================================
