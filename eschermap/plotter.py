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
import pathlib
from typing import Any, Mapping, Optional

#===============================================================================

from eschermap.annotations import Annotation, extract_annotations
from eschermap.exceptions import MapDocumentError
from eschermap.nodes import NodeExtraction, extract_nodes
from eschermap.options import PlotOptions
from eschermap.output import RenderBackend
from eschermap.primitives import ANNOTATION_TEXT, METABOLITE_TEXT, REACTION_TEXT
from eschermap.primitives import PointSet, Polyline, PrimitiveSet, TextBlock
from eschermap.reactions import ResolvedReaction, build_reactions
from eschermap.utils import FilePath, log

#===============================================================================

@dataclass(frozen=True)
class MapResolution:
    height: Optional[float] = None
    width: Optional[float] = None
    x: Optional[float] = None
    y: Optional[float] = None

#===============================================================================

class EscherMap(object):
    """
    A metabolic map, as laid out by Escher, that can be rendered into
    drawing primitives.

    :param document: A decoded Escher map, a ``[header, map]`` list.
    """
    def __init__(self, document: Any):
        if not isinstance(document, (list, tuple)) or len(document) != 2:
            raise MapDocumentError('An Escher map must be a list of a header and a map')
        escher = document[1]
        if not isinstance(escher, Mapping):
            raise MapDocumentError('Escher map body must be an object')
        for key in ['nodes', 'reactions']:
            if not isinstance(escher.get(key), Mapping):
                raise MapDocumentError(f'Escher map has no `{key}`')
        self.__nodes = escher['nodes']
        self.__reactions = escher['reactions']
        self.__text_labels = escher.get('text_labels') or {}
        self.__canvas = escher.get('canvas') or {}

    @classmethod
    def from_file(cls, path: str | pathlib.Path) -> EscherMap:
    #========================================================
        source = FilePath(path)
        log.info('Loading map', source=str(source))
        return cls(source.get_json())

    @property
    def resolution(self) -> MapResolution:
        return MapResolution(**{name: self.__canvas.get(name) for name in ['height', 'width', 'x', 'y']})

    def reaction_identifiers(self, identifier: str='bigg_id') -> list[str]:
    #=====================================================================
        return [reaction[identifier] for reaction in self.__reactions.values()
                    if identifier in reaction]

    def reaction_fluxes_in_order(self, fluxes: Mapping[str, float], identifier: str='bigg_id') -> list[float]:
    #=========================================================================================================
        """
        Absolute fluxes of the map's reactions in map order, with ``-1.0``
        for reactions that have no flux.
        """
        return [abs(fluxes[reaction_id]) if reaction_id in fluxes else -1.0
                    for reaction_id in self.reaction_identifiers(identifier)]

    def annotations(self) -> list[Annotation]:
    #=========================================
        return extract_annotations(self.__text_labels)

    def extract_nodes(self, options: PlotOptions) -> NodeExtraction:
    #===============================================================
        return extract_nodes(self.__nodes,
                             identifier=options.metabolite_identifier,
                             primary_size=options.metabolite_primary_node_size,
                             secondary_size=options.metabolite_secondary_node_size,
                             node_sizes=options.metabolite_node_sizes,
                             node_colors=options.metabolite_node_colors,
                             node_color=options.metabolite_node_color)

    def build_reactions(self, nodes: NodeExtraction, options: PlotOptions) -> list[ResolvedReaction]:
    #================================================================================================
        return build_reactions(self.__reactions, nodes.positions, nodes.labels,
                               identifier=options.reaction_identifier,
                               show_name=options.reaction_show_name_instead_of_id,
                               edge_colors=options.reaction_edge_colors,
                               edge_widths=options.reaction_edge_widths,
                               edge_color=options.reaction_edge_color,
                               edge_width=options.reaction_edge_width,
                               directions=options.reaction_directions,
                               arrow_size=options.reaction_arrow_size,
                               arrow_offset_fraction=options.reaction_arrow_head_offset_fraction,
                               samples=options.reaction_curve_samples)

    def render(self, options: Optional[PlotOptions]=None) -> PrimitiveSet:
    #=====================================================================
        if options is None:
            options = PlotOptions()
        annotations = self.annotations()
        nodes = self.extract_nodes(options)
        reactions = self.build_reactions(nodes, options)

        metabolites = nodes.metabolites
        points = PointSet(positions=tuple(metabolite.position for metabolite in metabolites),
                          sizes=tuple(metabolite.display_size for metabolite in metabolites),
                          colors=tuple(metabolite.display_color for metabolite in metabolites))
        polylines = tuple(Polyline(segment.sampled_polyline, reaction.width, reaction.color,
                                   dotted=reaction.dotted, reaction_id=reaction.display_identifier)
                            for reaction in reactions for segment in reaction.segments)
        arrows = tuple(arrow for reaction in reactions for arrow in reaction.arrows)

        texts = []
        if options.metabolite_show_text:
            labelled = [metabolite for metabolite in metabolites if metabolite.label is not None]
            texts.append(TextBlock(METABOLITE_TEXT,
                                   tuple(metabolite.label for metabolite in labelled),
                                   tuple(metabolite.label_position for metabolite in labelled),
                                   options.metabolite_text_size, options.metabolite_text_color))
        if options.reaction_show_text:
            labelled = [reaction for reaction in reactions
                            if reaction.label is not None and reaction.label_position is not None]
            texts.append(TextBlock(REACTION_TEXT,
                                   tuple(reaction.label for reaction in labelled),
                                   tuple(reaction.label_position for reaction in labelled),
                                   options.reaction_text_size, options.reaction_text_color))
        if options.annotation_show_text:
            texts.append(TextBlock(ANNOTATION_TEXT,
                                   tuple(annotation.text for annotation in annotations),
                                   tuple(annotation.position for annotation in annotations),
                                   options.annotation_text_size, options.annotation_text_color))

        log.debug('Rendered map', points=len(points), polylines=len(polylines),
                                  arrows=len(arrows), texts=len(texts))
        return PrimitiveSet(points=points, polylines=polylines, arrows=arrows, texts=tuple(texts))

    def recompute_with_overrides(self, options: Optional[PlotOptions]=None, **overrides) -> PrimitiveSet:
    #====================================================================================================
        if options is None:
            options = PlotOptions()
        return self.render(options.with_updates(**overrides))

    def draw(self, backend: RenderBackend, options: Optional[PlotOptions]=None) -> Any:
    #==================================================================================
        return self.render(options).draw(backend)

#===============================================================================
