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

from dataclasses import dataclass, field
from typing import Any, Mapping, Optional

#===============================================================================

from eschermap.geometry import Coords
from eschermap.styling import resolve_node_size, resolve_style
from eschermap.utils import log

#===============================================================================

METABOLITE_NODE = 'metabolite'

#===============================================================================

@dataclass(frozen=True)
class ResolvedMetabolite:
    internal_id: str
    position: Coords
    display_color: str
    display_size: float
    label: Optional[str] = None
    label_position: Optional[Coords] = None

#===============================================================================

@dataclass
class NodeExtraction:
    metabolites: list[ResolvedMetabolite] = field(default_factory=list)
    positions: dict[str, Coords] = field(default_factory=dict)
    labels: dict[str, str] = field(default_factory=dict)

    @property
    def marker_ids(self) -> list[str]:
        metabolite_ids = {metabolite.internal_id for metabolite in self.metabolites}
        return [node_id for node_id in self.positions if node_id not in metabolite_ids]

#===============================================================================

def node_position(node: Mapping[str, Any]) -> Optional[Coords]:
#==============================================================
    # Map documents have y increasing downwards
    if 'x' in node and 'y' in node:
        return (float(node['x']), -float(node['y']))
    return None

def extract_nodes(nodes: Mapping[str, Mapping[str, Any]], identifier: str='bigg_id',
                  primary_size: float=5.0, secondary_size: float=3.0,
                  node_sizes: Optional[Mapping[str, float]]=None,
                  node_colors: Optional[Mapping[str, str]]=None,
                  node_color: str='black') -> NodeExtraction:
#===========================================================================
    """
    Find the position of every node in a map and resolve the styling
    of metabolite nodes.

    Nodes without both ``x`` and ``y`` coordinates are ignored. Marker
    nodes are only given a position, as reaction segments are routed
    through them.
    """
    node_sizes = {} if node_sizes is None else node_sizes
    node_colors = {} if node_colors is None else node_colors
    extraction = NodeExtraction()
    skipped = 0
    for (node_id, node) in nodes.items():
        if (position := node_position(node)) is None:
            skipped += 1
            continue
        extraction.positions[node_id] = position
        if node.get('node_type') != METABOLITE_NODE:
            continue
        display_id = node.get(identifier)
        label_position = None
        if display_id is not None:
            extraction.labels[node_id] = display_id
            label_position = (float(node.get('label_x', position[0])),
                              -float(node['label_y']) if 'label_y' in node else position[1])
        extraction.metabolites.append(ResolvedMetabolite(
            internal_id=node_id,
            position=position,
            display_color=resolve_style(display_id, node_colors, node_color),
            display_size=resolve_node_size(display_id, node_sizes,
                                           bool(node.get('node_is_primary', False)),
                                           primary_size, secondary_size),
            label=display_id,
            label_position=label_position
        ))
    if skipped:
        log.warning('Skipped nodes without a position', count=skipped)
    log.debug('Extracted nodes', metabolites=len(extraction.metabolites),
                                 markers=len(extraction.positions) - len(extraction.metabolites))
    return extraction

#===============================================================================
