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

from abc import ABC, abstractmethod
from typing import Any

#===============================================================================

from eschermap.primitives import Arrow, PointSet, Polyline, TextBlock

#===============================================================================

class RenderBackend(ABC):
    """
    Something that draws primitives, such as a file writer or a plotting
    library.
    """
    @abstractmethod
    def draw_points(self, points: PointSet):
        pass

    @abstractmethod
    def draw_polyline(self, polyline: Polyline):
        pass

    @abstractmethod
    def draw_arrow(self, arrow: Arrow):
        pass

    @abstractmethod
    def draw_text(self, text: TextBlock):
        pass

    def finish(self) -> Any:
        return None

#===============================================================================

from .geojson import GeoJSONBackend
from .svg import SVGBackend

#===============================================================================
