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

#===============================================================================

from beziers.cubicbezier import CubicBezier
from beziers.point import Point as BezierPoint
import numpy as np

#===============================================================================

Coords = tuple[float, float]

#===============================================================================

def coords_to_point(pt: Coords) -> BezierPoint:
    return BezierPoint(*pt)

def point_to_coords(pt: BezierPoint) -> Coords:
    return (float(pt.x), float(pt.y))

def cubic_bezier(p0: Coords, p1: Coords, p2: Coords, p3: Coords) -> CubicBezier:
    return CubicBezier(coords_to_point(p0), coords_to_point(p1),
                       coords_to_point(p2), coords_to_point(p3))

#===============================================================================

def evaluate_cubic_bezier(t: float, p0: Coords, p1: Coords, p2: Coords, p3: Coords) -> Coords:
#=============================================================================================
    return point_to_coords(cubic_bezier(p0, p1, p2, p3).pointAtTime(t))

def bezier_sample(bz: CubicBezier, num_points: int=100) -> list[Coords]:
#=======================================================================
    """
    Sample a Bezier at ``num_points`` evenly spaced times, including both
    end points.
    """
    return [point_to_coords(bz.pointAtTime(float(t))) for t in np.linspace(0.0, 1.0, num_points)]

def sample_curve(p0: Coords, p1: Coords, p2: Coords, p3: Coords, count: int) -> list[Coords]:
#===========================================================================================
    return bezier_sample(cubic_bezier(p0, p1, p2, p3), count)

def sample_line(p0: Coords, p3: Coords, count: int) -> list[Coords]:
#===================================================================
    ts = np.linspace(0.0, 1.0, count)[:, np.newaxis]
    coords = (1.0 - ts)*np.asarray(p0, dtype=float) + ts*np.asarray(p3, dtype=float)
    return [(float(x), float(y)) for (x, y) in coords]

#===============================================================================

def cumulative_lengths(polyline: list[Coords]) -> np.ndarray:
#============================================================
    coords = np.asarray(polyline, dtype=float).reshape(-1, 2)
    if len(coords) == 0:
        return np.zeros(0)
    steps = np.hypot(*np.diff(coords, axis=0).T)
    return np.concatenate(([0.0], np.cumsum(steps)))

def arc_length_index(polyline: list[Coords], fraction: float) -> int | None:
#===========================================================================
    """
    Find the first point of a sampled curve whose distance along the curve
    reaches ``fraction`` of the curve's total length.

    :returns: The point's index, or ``None`` if ``fraction`` lies outside
              ``[0, 1]`` or the polyline is empty.
    """
    if not 0.0 <= fraction <= 1.0:
        return None
    cumulative = cumulative_lengths(polyline)
    if len(cumulative) == 0:
        return None
    # The final cumulative length is the total so ``fraction == 1`` always finds it
    indices = np.flatnonzero(cumulative >= fraction*cumulative[-1])
    return int(indices[0]) if len(indices) else None

#===============================================================================
