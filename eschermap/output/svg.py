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

from typing import Optional

#===============================================================================

from lxml import etree

#===============================================================================

from eschermap.geometry import Coords
from eschermap.primitives import Arrow, PointSet, Polyline, TextBlock

from . import RenderBackend

#===============================================================================

SVG_NS = 'http://www.w3.org/2000/svg'

def SVG_TAG(tag):        # An SVG namespaced lxml.etree tag
    return '{{{}}}{}'.format(SVG_NS, tag)

#===============================================================================

BACKGROUND_COLOUR = 'white'
VIEWBOX_MARGIN = 20

#===============================================================================

def svg_coords(point: Coords) -> tuple[float, float]:
    # SVG has y increasing downwards
    return (point[0], -point[1])

def svg_number(value: float) -> str:
    return f'{value:.2f}'

def svg_points(points) -> str:
    return ' '.join(f'{svg_number(x)},{svg_number(y)}' for (x, y) in map(svg_coords, points))

#===============================================================================

class SVGBackend(RenderBackend):
    """
    Draw primitives as an SVG document.

    :param view_box: The ``(x, y, width, height)`` of the map's canvas, in
                     the map's coordinates. Defaults to the bounds of what
                     is drawn.
    :param transparent: Don't paint a background.
    """
    def __init__(self, view_box: Optional[tuple[float, float, float, float]]=None, transparent: bool=False):
        self.__view_box = view_box
        self.__transparent = transparent
        self.__elements: list[etree._Element] = []
        self.__bounds: Optional[list[float]] = None

    def __extend_bounds(self, points, margin: float=0.0):
    #====================================================
        for (x, y) in map(svg_coords, points):
            if self.__bounds is None:
                self.__bounds = [x - margin, y - margin, x + margin, y + margin]
            else:
                self.__bounds = [min(self.__bounds[0], x - margin), min(self.__bounds[1], y - margin),
                                 max(self.__bounds[2], x + margin), max(self.__bounds[3], y + margin)]

    def __element(self, tag: str, text: Optional[str]=None, **attributes) -> etree._Element:
    #======================================================================================
        element = etree.Element(SVG_TAG(tag), {name.replace('_', '-'): str(value)
                                                for (name, value) in attributes.items()})
        if text is not None:
            element.text = text
        self.__elements.append(element)
        return element

    def draw_points(self, points: PointSet):
    #=======================================
        for (position, size, colour) in zip(points.positions, points.sizes, points.colors):
            (x, y) = svg_coords(position)
            self.__element('circle', cx=svg_number(x), cy=svg_number(y),
                                     r=svg_number(size/2), fill=colour)
            self.__extend_bounds([position], size/2)

    def draw_polyline(self, polyline: Polyline):
    #===========================================
        attributes = {
            'points': svg_points(polyline.points),
            'fill': 'none',
            'stroke': polyline.color,
            'stroke_width': svg_number(polyline.width),
        }
        if polyline.dotted:
            attributes['stroke_dasharray'] = f'{svg_number(polyline.width)},{svg_number(2*polyline.width)}'
        if polyline.reaction_id is not None:
            attributes['class'] = f'reaction {polyline.reaction_id}'
        self.__element('polyline', **attributes)
        self.__extend_bounds(polyline.points, polyline.width)

    def draw_arrow(self, arrow: Arrow):
    #==================================
        polygon = arrow.polygon()
        coords = list(polygon.exterior.coords)[:-1]
        self.__element('polygon', points=svg_points(coords), fill=arrow.color)
        self.__extend_bounds(coords)

    def draw_text(self, text: TextBlock):
    #====================================
        for (label, position) in zip(text.texts, text.positions):
            (x, y) = svg_coords(position)
            self.__element('text', label, x=svg_number(x), y=svg_number(y),
                           font_size=svg_number(text.size), fill=text.color,
                           font_family='sans-serif', **{'class': f'{text.kind}-label'})
            self.__extend_bounds([position])

    def view_box(self) -> tuple[float, float, float, float]:
    #=======================================================
        if self.__view_box is not None:
            return self.__view_box
        if self.__bounds is None:
            return (0.0, 0.0, 0.0, 0.0)
        return (self.__bounds[0] - VIEWBOX_MARGIN,
                self.__bounds[1] - VIEWBOX_MARGIN,
                self.__bounds[2] - self.__bounds[0] + 2*VIEWBOX_MARGIN,
                self.__bounds[3] - self.__bounds[1] + 2*VIEWBOX_MARGIN)

    def finish(self) -> bytes:
    #=========================
        view_box = self.view_box()
        svg = etree.Element(SVG_TAG('svg'), nsmap={None: SVG_NS})
        svg.set('viewBox', ' '.join(svg_number(v) for v in view_box))
        svg.set('width', svg_number(view_box[2]))
        svg.set('height', svg_number(view_box[3]))
        if not self.__transparent:
            etree.SubElement(svg, SVG_TAG('rect'), {
                'x': svg_number(view_box[0]), 'y': svg_number(view_box[1]),
                'width': svg_number(view_box[2]), 'height': svg_number(view_box[3]),
                'fill': BACKGROUND_COLOUR
            })
        for element in self.__elements:
            svg.append(element)
        return etree.tostring(svg, encoding='utf-8', pretty_print=True, xml_declaration=True)

    def save(self, filename: str):
    #=============================
        with open(filename, 'wb') as fp:
            fp.write(self.finish())

#===============================================================================
