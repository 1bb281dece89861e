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

from typing import Any, Mapping, Optional, TypeVar

#===============================================================================

T = TypeVar('T')

#===============================================================================

def resolve_style(identifier: Optional[str], overrides: Mapping[str, T], fallback: T) -> T:
#=========================================================================================
    if identifier is not None and identifier in overrides:
        return overrides[identifier]
    return fallback

def resolve_node_size(identifier: Optional[str], overrides: Mapping[str, float],
                      is_primary: bool, primary_size: float, secondary_size: float) -> float:
#=======================================================================================
    return resolve_style(identifier, overrides, primary_size if is_primary else secondary_size)

#===============================================================================

def reaction_missing_data(identifier: Optional[str], colours: Mapping[str, Any],
                          widths: Mapping[str, Any]) -> bool:
#=================================================================================
    """
    Is a reaction without styling data, and so to be drawn dotted?

    When no overrides at all are given then no reaction is singled out.
    Otherwise a reaction has data if it is in either of the override maps.
    """
    if len(colours) == 0 and len(widths) == 0:
        return False
    return identifier is None or (identifier not in colours and identifier not in widths)

#===============================================================================
