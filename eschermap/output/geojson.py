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

import json
from typing import Any

#===============================================================================

import shapely.geometry

#===============================================================================

from eschermap.primitives import Arrow, PointSet, Polyline, TextBlock

from . import RenderBackend

#===============================================================================

class GeoJSONBackend(RenderBackend):
    def __init__(self):
        self.__features: list[dict[str, Any]] = []

    def __add_feature(self, geometry, properties: dict[str, Any]):
    #=============================================================
        self.__features.append({
            'type': 'Feature',
            'id': len(self.__features),
            'geometry': shapely.geometry.mapping(geometry),
            'properties': properties
        })

    def draw_points(self, points: PointSet):
    #=======================================
        for (position, size, colour) in zip(points.positions, points.sizes, points.colors):
            self.__add_feature(shapely.geometry.Point(position), {
                'kind': 'metabolite',
                'size': size,
                'color': colour
            })

    def draw_polyline(self, polyline: Polyline):
    #===========================================
        self.__add_feature(shapely.geometry.LineString(polyline.points), {
            'kind': 'reaction',
            'reaction-id': polyline.reaction_id,
            'width': polyline.width,
            'color': polyline.color,
            'dotted': polyline.dotted
        })

    def draw_arrow(self, arrow: Arrow):
    #==================================
        self.__add_feature(arrow.polygon(), {
            'kind': 'arrow',
            'reaction-id': arrow.reaction_id,
            'color': arrow.color
        })

    def draw_text(self, text: TextBlock):
    #====================================
        for (label, position) in zip(text.texts, text.positions):
            self.__add_feature(shapely.geometry.Point(position), {
                'kind': f'{text.kind}-label',
                'text': label,
                'size': text.size,
                'color': text.color
            })

    def finish(self) -> dict[str, Any]:
    #==================================
        return {
            'type': 'FeatureCollection',
            'features': self.__features
        }

    def save(self, filename: str, pretty_print=False):
    #=================================================
        with open(filename, 'w') as output_file:
            output_file.write(json.dumps(self.finish(), indent=4 if pretty_print else None))

#===============================================================================
