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
from typing import Any, Mapping, Optional

#===============================================================================

from eschermap.exceptions import DanglingNodeError
from eschermap.geometry import Coords, arc_length_index, sample_curve, sample_line
from eschermap.options import ReactionDirection
from eschermap.primitives import Arrow
from eschermap.styling import reaction_missing_data, resolve_style
from eschermap.utils import log, ProgressBar

#===============================================================================

@dataclass(frozen=True)
class ResolvedSegment:
    sampled_polyline: tuple[Coords, ...]
    from_metabolite_label: Optional[str] = None
    to_metabolite_label: Optional[str] = None

@dataclass(frozen=True)
class ResolvedReaction:
    internal_id: str
    display_identifier: Optional[str]
    color: str
    width: float
    dotted: bool
    label: Optional[str] = None
    label_position: Optional[Coords] = None
    segments: tuple[ResolvedSegment, ...] = ()
    arrows: tuple[Arrow, ...] = ()

#===============================================================================

def control_point(point: Optional[Mapping[str, Any]]) -> Optional[Coords]:
    if point is None:
        return None
    return (float(point['x']), -float(point['y']))

def sample_segment(segment: Mapping[str, Any], positions: Mapping[str, Coords],
                   reaction_id: str, samples: int) -> list[Coords]:
#===========================================================================
    try:
        start = positions[segment['from_node_id']]
    except KeyError:
        raise DanglingNodeError(reaction_id, segment.get('from_node_id')) from None
    try:
        end = positions[segment['to_node_id']]
    except KeyError:
        raise DanglingNodeError(reaction_id, segment.get('to_node_id')) from None
    b1 = control_point(segment.get('b1'))
    b2 = control_point(segment.get('b2'))
    if b1 is not None and b2 is not None:
        return sample_curve(start, b1, b2, end, samples)
    return sample_line(start, end, samples)

#===============================================================================

def arrow_placement(position: Coords, towards: Coords) -> Optional[tuple[Coords, Coords]]:
#=========================================================================================
    direction = (towards[0] - position[0], towards[1] - position[1])
    if direction == (0.0, 0.0):
        # Coincident samples have no heading
        return None
    return (position, direction)

def head_arrow(polyline: tuple[Coords, ...], offset_fraction: float) -> Optional[tuple[Coords, Coords]]:
#======================================================================================================
    """
    Position and direction of an arrow pointing into the end of a polyline.

    The point is found by mirroring the index of the point that is
    ``offset_fraction`` along the polyline from its start.
    """
    if len(polyline) < 2 or (index := arc_length_index(polyline, offset_fraction)) is None:
        return None
    n = max(0, min(len(polyline) - 1 - index, len(polyline) - 2))
    (position, following) = (polyline[n], polyline[n+1])
    return arrow_placement(position, following)

def tail_arrow(polyline: tuple[Coords, ...], offset_fraction: float) -> Optional[tuple[Coords, Coords]]:
#======================================================================================================
    if len(polyline) < 2 or (index := arc_length_index(polyline, 1.0 - offset_fraction)) is None:
        return None
    n = min(len(polyline) - 1, max(len(polyline) - 1 - index, 1))
    (position, previous) = (polyline[n], polyline[n-1])
    return arrow_placement(position, previous)

#===============================================================================

def is_target(label: Optional[str], direction: ReactionDirection, sign: int) -> bool:
#===================================================================================
    if label is None or (coefficient := direction.stoichiometry.get(label)) is None:
        return False
    return (coefficient > 0 and sign > 0) or (coefficient < 0 and sign < 0)

def arrow_ends(segment: ResolvedSegment, direction: Optional[ReactionDirection],
               reversible: bool) -> tuple[bool, bool]:
#===================================================================================
    """
    Which ends of a segment get an arrow, as a ``(start, end)`` pair.
    """
    if direction is None:
        # Reversible reactions without direction data still point into their reactants
        return (reversible and segment.from_metabolite_label is not None, False)
    at_start = at_end = False
    for sign in direction.signs:
        if is_target(segment.to_metabolite_label, direction, sign):
            at_end = True
        if sign < 0 and is_target(segment.from_metabolite_label, direction, sign):
            at_start = True
    return (at_start, at_end)

#===============================================================================

def reaction_label(reaction: Mapping[str, Any], identifier: str, show_name: bool) -> Optional[str]:
    if show_name and reaction.get('name') is not None:
        return reaction['name']
    return reaction.get(identifier)

#===============================================================================

class ReactionBuilder(object):
    def __init__(self, positions: Mapping[str, Coords], labels: Mapping[str, str],
                       identifier: str='bigg_id', show_name: bool=False,
                       edge_colors: Optional[Mapping[str, str]]=None,
                       edge_widths: Optional[Mapping[str, float]]=None,
                       edge_color: str='black', edge_width: float=2.0,
                       directions: Optional[Mapping[str, ReactionDirection]]=None,
                       arrow_size: float=6.0, arrow_offset_fraction: float=0.1,
                       samples: int=100):
        self.__positions = positions
        self.__labels = labels
        self.__identifier = identifier
        self.__show_name = show_name
        self.__edge_colors = {} if edge_colors is None else edge_colors
        self.__edge_widths = {} if edge_widths is None else edge_widths
        self.__edge_color = edge_color
        self.__edge_width = edge_width
        self.__directions = {} if directions is None else directions
        self.__arrow_size = arrow_size
        self.__arrow_offset_fraction = arrow_offset_fraction
        self.__samples = samples

    def build(self, reactions: Mapping[str, Mapping[str, Any]]) -> list[ResolvedReaction]:
    #=====================================================================================
        resolved = []
        with ProgressBar(total=len(reactions), unit='rxn', ncols=40,
                         bar_format='{l_bar}{bar}| {n_fmt}/{total_fmt}') as progress_bar:
            for (reaction_id, reaction) in reactions.items():
                resolved.append(self.build_reaction(reaction_id, reaction))
                progress_bar.update(1)
        log.debug('Built reactions', reactions=len(resolved),
                                     arrows=sum(len(reaction.arrows) for reaction in resolved))
        return resolved

    def build_reaction(self, reaction_id: str, reaction: Mapping[str, Any]) -> ResolvedReaction:
    #===========================================================================================
        display_id = reaction.get(self.__identifier)
        if display_id is None:
            log.warning('Reaction has no identifier', reaction=reaction_id, field=self.__identifier)
        colour = resolve_style(display_id, self.__edge_colors, self.__edge_color)
        segments = []
        for segment in reaction.get('segments', {}).values():
            polyline = tuple(sample_segment(segment, self.__positions, reaction_id, self.__samples))
            segments.append(ResolvedSegment(polyline,
                from_metabolite_label=self.__labels.get(segment['from_node_id']),
                to_metabolite_label=self.__labels.get(segment['to_node_id'])))
        label = reaction_label(reaction, self.__identifier, self.__show_name)
        label_position = None
        if 'label_x' in reaction and 'label_y' in reaction:
            label_position = (float(reaction['label_x']), -float(reaction['label_y']))
        return ResolvedReaction(
            internal_id=reaction_id,
            display_identifier=display_id,
            color=colour,
            width=resolve_style(display_id, self.__edge_widths, self.__edge_width),
            dotted=reaction_missing_data(display_id, self.__edge_colors, self.__edge_widths),
            label=label,
            label_position=label_position,
            segments=tuple(segments),
            arrows=tuple(self.__arrows(display_id, segments, colour,
                                       bool(reaction.get('reversibility', False))))
        )

    def __arrows(self, display_id: Optional[str], segments: list[ResolvedSegment],
                 colour: str, reversible: bool) -> list[Arrow]:
    #============================================================================
        direction = self.__directions.get(display_id) if display_id is not None else None
        arrows = []
        for segment in segments:
            (at_start, at_end) = arrow_ends(segment, direction, reversible)
            placements = []
            if at_end:
                placements.append(head_arrow(segment.sampled_polyline, self.__arrow_offset_fraction))
            if at_start:
                placements.append(tail_arrow(segment.sampled_polyline, self.__arrow_offset_fraction))
            for placement in placements:
                if placement is not None:
                    arrows.append(Arrow(placement[0], placement[1], self.__arrow_size,
                                        colour, reaction_id=display_id))
        return arrows

#===============================================================================

def build_reactions(reactions: Mapping[str, Mapping[str, Any]], positions: Mapping[str, Coords],
                    labels: Mapping[str, str], **kwds) -> list[ResolvedReaction]:
#=============================================================================================
    return ReactionBuilder(positions, labels, **kwds).build(reactions)

#===============================================================================
