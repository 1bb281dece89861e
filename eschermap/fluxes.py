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

import math
from typing import Iterable, Mapping, NamedTuple, Optional, Sequence

#===============================================================================

import numpy as np
import webcolors

#===============================================================================

# Nine-step ``Reds`` colour scheme, lightest first

REDS_9 = ('#fff5f0', '#fee0d2', '#fcbba1', '#fc9272', '#fb6a4a',
          '#ef3b2c', '#cb181d', '#a50f15', '#67000d')

MIN_FLUX = 1e-8

MIN_EDGE_WIDTH = 0.5
EDGE_WIDTH_RANGE = 5.0

#===============================================================================

class FluxStyles(NamedTuple):
    widths: dict[str, float]
    colors: dict[str, str]

#===============================================================================

def colour_rgb(colour: str) -> np.ndarray:
    hex_colour = colour if colour.startswith('#') else webcolors.name_to_hex(colour)
    return np.array(tuple(webcolors.hex_to_rgb(hex_colour)), dtype=float)

def interpolate_colour(low: str, high: str, fraction: float) -> str:
#===================================================================
    rgb = (1.0 - fraction)*colour_rgb(low) + fraction*colour_rgb(high)
    return webcolors.rgb_to_hex(tuple(int(round(c)) for c in rgb))

def scheme_colour(scheme: Sequence[str], fraction: float) -> str:
#================================================================
    """
    The colour at ``fraction`` along a scheme of evenly spaced stops,
    blending the two stops either side of it.
    """
    fraction = min(max(fraction, 0.0), 1.0)
    position = fraction*(len(scheme) - 1)
    index = min(int(math.floor(position)), len(scheme) - 2)
    return interpolate_colour(scheme[index], scheme[index + 1], position - index)

def normalised_log_fluxes(fluxes: Mapping[str, float], reaction_ids: Iterable[str]) -> dict[str, float]:
#======================================================================================================
    """
    Scale the logarithm of absolute fluxes into ``[0, 1]``.

    Only reactions that are in ``reaction_ids`` and that carry a flux are
    scaled.
    """
    in_map = set(reaction_ids)
    log_fluxes = {reaction_id: math.log(abs(flux)) for (reaction_id, flux) in fluxes.items()
                    if reaction_id in in_map and abs(flux) > MIN_FLUX}
    if len(log_fluxes) == 0:
        return {}
    min_flux = min(log_fluxes.values())
    flux_range = max(log_fluxes.values()) - min_flux
    if flux_range == 0:
        return {reaction_id: 1.0 for reaction_id in log_fluxes}
    return {reaction_id: (flux - min_flux)/flux_range for (reaction_id, flux) in log_fluxes.items()}

def flux_styles(fluxes: Mapping[str, float], reaction_ids: Iterable[str],
                edge_weights: Optional[Mapping[str, float]]=None,
                colour_scheme: Sequence[str]=REDS_9) -> FluxStyles:
#============================================================================================
    """
    Edge width and colour overrides for reactions.

    Colours come from ``fluxes`` and widths from ``edge_weights``. Without
    edge weights no widths are given, so edges keep their configured width.
    """
    reaction_ids = list(reaction_ids)
    widths = {}
    if edge_weights is not None:
        widths = {reaction_id: MIN_EDGE_WIDTH + EDGE_WIDTH_RANGE*value
                    for (reaction_id, value) in normalised_log_fluxes(edge_weights, reaction_ids).items()}
    return FluxStyles(
        widths=widths,
        colors={reaction_id: scheme_colour(colour_scheme, value)
                    for (reaction_id, value) in normalised_log_fluxes(fluxes, reaction_ids).items()})

#===============================================================================
