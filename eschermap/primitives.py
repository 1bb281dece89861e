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

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, TYPE_CHECKING

#===============================================================================

import shapely.geometry

#===============================================================================

from eschermap.geometry import Coords, arrow_polygon

if TYPE_CHECKING:
    from eschermap.output import RenderBackend

#===============================================================================

METABOLITE_TEXT = 'metabolite'
REACTION_TEXT = 'reaction'
ANNOTATION_TEXT = 'annotation'

#===============================================================================

@dataclass(frozen=True)
class PointSet:
    positions: tuple[Coords, ...] = ()
    sizes: tuple[float, ...] = ()
    colors: tuple[str, ...] = ()

    def __len__(self):
        return len(self.positions)

@dataclass(frozen=True)
class Polyline:
    points: tuple[Coords, ...]
    width: float
    color: str
    dotted: bool = False
    reaction_id: Optional[str] = None

@dataclass(frozen=True)
class Arrow:
    position: Coords
    direction: Coords
    size: float
    color: str
    reaction_id: Optional[str] = None

    def polygon(self) -> shapely.geometry.Polygon:
        return arrow_polygon(self.position, self.direction, self.size)

@dataclass(frozen=True)
class TextBlock:
    kind: str
    texts: tuple[str, ...]
    positions: tuple[Coords, ...]
    size: float
    color: str

#===============================================================================

@dataclass(frozen=True)
class PrimitiveSet:
    points: PointSet = PointSet()
    polylines: tuple[Polyline, ...] = ()
    arrows: tuple[Arrow, ...] = ()
    texts: tuple[TextBlock, ...] = ()

    def text(self, kind: str) -> Optional[TextBlock]:
    #================================================
        for block in self.texts:
            if block.kind == kind:
                return block

    def draw(self, backend: RenderBackend):
    #======================================
        """
        Send every primitive to a rendering backend, edges first so that
        nodes and labels are drawn over them.
        """
        for polyline in self.polylines:
            backend.draw_polyline(polyline)
        for arrow in self.arrows:
            backend.draw_arrow(arrow)
        backend.draw_points(self.points)
        for block in self.texts:
            backend.draw_text(block)
        return backend.finish()

#===============================================================================
