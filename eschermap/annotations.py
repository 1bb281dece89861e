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

from dataclasses import dataclass
from typing import Any, Mapping

#===============================================================================

from eschermap.geometry import Coords

#===============================================================================

@dataclass(frozen=True)
class Annotation:
    position: Coords
    text: str

def extract_annotations(text_labels: Mapping[str, Mapping[str, Any]]) -> list[Annotation]:
#=========================================================================================
    return [Annotation((float(label.get('x', 0.0)), -float(label.get('y', 0.0))),
                       label.get('text', ''))
                for label in text_labels.values()]

#===============================================================================
