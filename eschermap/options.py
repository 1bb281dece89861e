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

import dataclasses
from dataclasses import dataclass, field
import numbers
import pathlib
from typing import Any, Mapping, NamedTuple

#===============================================================================

import webcolors
import yaml

#===============================================================================

from eschermap.exceptions import InvalidOptionError
from eschermap.utils import FilePath

#===============================================================================

FORWARD = 'forward'
BACKWARD = 'backward'
BIDIRECTIONAL = 'bidirectional'

DIRECTION_SIGNS = {
    FORWARD: (1,),
    BACKWARD: (-1,),
    BIDIRECTIONAL: (1, -1),
}

#===============================================================================

class ReactionDirection(NamedTuple):
    stoichiometry: dict[str, float]
    direction: str

    @classmethod
    def from_value(cls, reaction_id: str, value: Any) -> ReactionDirection:
    #=======================================================================
        if isinstance(value, Mapping):
            stoichiometry = value.get('stoichiometry')
            direction = value.get('direction')
        elif isinstance(value, (list, tuple)) and len(value) == 2:
            (stoichiometry, direction) = value
        else:
            raise InvalidOptionError(f'Direction for reaction {reaction_id} must be a (stoichiometry, direction) pair')
        if direction not in DIRECTION_SIGNS:
            raise InvalidOptionError(f'Unsupported direction for reaction {reaction_id}: {direction}')
        if not isinstance(stoichiometry, Mapping):
            raise InvalidOptionError(f'Stoichiometry for reaction {reaction_id} must be a mapping')
        for (metabolite, coefficient) in stoichiometry.items():
            if not is_number(coefficient):
                raise InvalidOptionError(f'Coefficient of {metabolite} in reaction {reaction_id} is not a number')
        return cls(dict(stoichiometry), direction)

    @property
    def signs(self) -> tuple[int, ...]:
        return DIRECTION_SIGNS[self.direction]

#===============================================================================

def is_number(value: Any) -> bool:
    return isinstance(value, numbers.Real) and not isinstance(value, bool)

def is_colour_component(component: str) -> bool:
#===============================================
    try:
        if component.endswith('%'):
            return 0.0 <= float(component[:-1]) <= 100.0
        return 0 <= int(component) <= 255
    except ValueError:
        return False

def is_rgb_colour(value: str) -> bool:
#=====================================
    """
    Check an ``rgb(r, g, b)`` or ``rgba(r, g, b, a)`` colour, with components
    either all integers in ``[0, 255]`` or all percentages.
    """
    if not value.endswith(')'):
        return False
    if value.startswith('rgb('):
        components = [c.strip() for c in value[4:-1].split(',')]
    elif value.startswith('rgba('):
        components = [c.strip() for c in value[5:-1].split(',')]
        if len(components) != 4:
            return False
        try:
            if not 0.0 <= float(components.pop()) <= 1.0:
                return False
        except ValueError:
            return False
    else:
        return False
    if len(components) != 3 or len({c.endswith('%') for c in components}) != 1:
        return False
    return all(is_colour_component(c) for c in components)

def is_colour(value: Any) -> bool:
#=================================
    if not isinstance(value, str):
        return False
    if value.startswith('rgb'):
        return is_rgb_colour(value)
    try:
        if value.startswith('#'):
            webcolors.normalize_hex(value)
        else:
            webcolors.name_to_hex(value)
    except ValueError:
        return False
    return True

#===============================================================================

COLOUR_MAPS = ['metabolite_node_colors', 'reaction_edge_colors']
NUMERIC_MAPS = ['metabolite_node_sizes', 'reaction_edge_widths']
COLOURS = ['metabolite_node_color', 'metabolite_text_color', 'reaction_edge_color',
           'reaction_text_color', 'annotation_text_color']
NUMBERS = ['metabolite_primary_node_size', 'metabolite_secondary_node_size',
           'metabolite_text_size', 'reaction_edge_width', 'reaction_arrow_size',
           'reaction_text_size', 'annotation_text_size']

#===============================================================================

@dataclass(frozen=True)
class PlotOptions:
    metabolite_identifier: str = 'bigg_id'
    metabolite_show_text: bool = False
    metabolite_text_size: float = 4.0
    metabolite_text_color: str = 'black'
    metabolite_primary_node_size: float = 5.0
    metabolite_secondary_node_size: float = 3.0
    metabolite_node_sizes: dict[str, float] = field(default_factory=dict)
    metabolite_node_colors: dict[str, str] = field(default_factory=dict)
    metabolite_node_color: str = 'black'

    reaction_identifier: str = 'bigg_id'
    reaction_show_text: bool = False
    reaction_show_name_instead_of_id: bool = False
    reaction_text_size: float = 4.0
    reaction_text_color: str = 'black'
    reaction_edge_colors: dict[str, str] = field(default_factory=dict)
    reaction_edge_widths: dict[str, float] = field(default_factory=dict)
    reaction_edge_color: str = 'black'
    reaction_edge_width: float = 2.0
    reaction_arrow_size: float = 6.0
    reaction_arrow_head_offset_fraction: float = 0.1
    reaction_directions: dict[str, ReactionDirection] = field(default_factory=dict)
    reaction_curve_samples: int = 100

    annotation_show_text: bool = False
    annotation_text_size: float = 4.0
    annotation_text_color: str = 'black'

    def __post_init__(self):
        # Own copies of maps so callers can't change a render pass's inputs
        for name in COLOUR_MAPS + NUMERIC_MAPS:
            object.__setattr__(self, name, dict(getattr(self, name)))
        object.__setattr__(self, 'reaction_directions', {
            reaction_id: ReactionDirection.from_value(reaction_id, value)
                for (reaction_id, value) in dict(self.reaction_directions).items()
        })
        self.__validate()

    def __validate(self):
    #====================
        for name in COLOUR_MAPS:
            for (entity_id, colour) in getattr(self, name).items():
                if not is_colour(colour):
                    raise InvalidOptionError(f'`{name}` has an invalid colour for {entity_id}: {colour!r}')
        for name in NUMERIC_MAPS:
            for (entity_id, value) in getattr(self, name).items():
                if not is_number(value):
                    raise InvalidOptionError(f'`{name}` has a non-numeric value for {entity_id}: {value!r}')
        for name in COLOURS:
            if not is_colour(getattr(self, name)):
                raise InvalidOptionError(f'`{name}` is not a valid colour: {getattr(self, name)!r}')
        for name in NUMBERS:
            if not is_number(getattr(self, name)):
                raise InvalidOptionError(f'`{name}` must be a number')
        if not 0.0 <= self.reaction_arrow_head_offset_fraction <= 1.0:
            raise InvalidOptionError('`reaction_arrow_head_offset_fraction` must be between 0 and 1')
        if not isinstance(self.reaction_curve_samples, int) or self.reaction_curve_samples < 2:
            raise InvalidOptionError('`reaction_curve_samples` must be an integer of at least 2')

    @classmethod
    def option_names(cls) -> list[str]:
        return [f.name for f in dataclasses.fields(cls)]

    @classmethod
    def from_dict(cls, options: Mapping[str, Any]) -> PlotOptions:
    #=============================================================
        if (unknown := sorted(set(options) - set(cls.option_names()))):
            raise InvalidOptionError(f'Unknown options: {", ".join(unknown)}')
        return cls(**options)

    @classmethod
    def from_file(cls, path: str | pathlib.Path) -> PlotOptions:
    #===========================================================
        """
        Load options from a YAML or JSON file.
        """
        source = FilePath(path)
        if source.extension == 'json':
            options = source.get_json()
        else:
            options = yaml.safe_load(source.get_data())
        if options is None:
            options = {}
        elif not isinstance(options, Mapping):
            raise InvalidOptionError(f'{path}: options must be a mapping')
        return cls.from_dict(options)

    def with_updates(self, **changes) -> PlotOptions:
    #================================================
        return self.from_dict({**{name: getattr(self, name) for name in self.option_names()},
                               **changes})

#===============================================================================
