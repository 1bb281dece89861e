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

import math

#===============================================================================

from beziers.point import Point as BezierPoint
import shapely.geometry

#===============================================================================

from eschermap.geometry.beziers import Coords, coords_to_point, point_to_coords

#===============================================================================

def heading(direction: Coords) -> float:
    return coords_to_point(direction).angle

def arrow_polygon(back: Coords, direction: Coords, length: float) -> shapely.geometry.Polygon:
#=============================================================================================
    """
    An isosceles triangle with its base centred on ``back`` and its tip
    ``length`` further on in ``direction``.
    """
    angle = heading(direction)
    back_point = coords_to_point(back)
    tip = back_point + BezierPoint.fromAngle(angle)*length
    offset = BezierPoint.fromAngle(angle + math.pi/2)*length/3
    return shapely.geometry.Polygon([point_to_coords(tip),
                                     point_to_coords(back_point + offset),
                                     point_to_coords(back_point - offset)])

#===============================================================================
