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

import argparse
import sys

#===============================================================================

from eschermap import EscherMap, PlotOptions, __version__
from eschermap.fluxes import flux_styles
from eschermap.output import GeoJSONBackend, SVGBackend
from eschermap.utils import FilePath, configure_logging, log

#===============================================================================

def arg_parser():
    parser = argparse.ArgumentParser(description='Draw an Escher metabolic map.')

    parser.add_argument('-v', '--version', action='version', version=__version__)

    log_options = parser.add_argument_group('Logging')
    log_options.add_argument('--log', dest='logFile', metavar='LOG_FILE',
                        help="Append messages to a log file")
    log_options.add_argument('--silent', action='store_true',
                        help='Suppress all messages to screen')
    log_options.add_argument('--verbose', action='store_true',
                        help="Show progress bars")
    log_options.add_argument('--debug', action='store_true',
                        help='See `log.debug()` messages in log')

    drawing_options = parser.add_argument_group('Drawing')
    drawing_options.add_argument('--options', metavar='OPTIONS_FILE',
                        help='YAML or JSON file of plot options')
    drawing_options.add_argument('--fluxes', metavar='FLUX_FILE',
                        help='JSON file of reaction fluxes used to set edge colours')
    drawing_options.add_argument('--edge-weights', dest='edgeWeights', metavar='WEIGHTS_FILE',
                        help='JSON file of reaction weights used to set edge widths (needs `--fluxes`)')
    drawing_options.add_argument('--format', choices=['svg', 'geojson'], default='svg',
                        help='Output format (defaults to `svg`)')
    drawing_options.add_argument('--transparent', action='store_true',
                        help="Don't paint a background (SVG only)")

    required = parser.add_argument_group('Required arguments')
    required.add_argument('--map', dest='mapFile', required=True,
                        help='Path of an Escher map JSON file')
    required.add_argument('--output', required=True,
                        help='File to write the drawing to')

    return parser

#===============================================================================

def make_drawing(args):
#======================
    escher_map = EscherMap.from_file(args.mapFile)
    options = PlotOptions.from_file(args.options) if args.options else PlotOptions()
    if args.fluxes:
        edge_weights = FilePath(args.edgeWeights).get_json() if args.edgeWeights else None
        styles = flux_styles(FilePath(args.fluxes).get_json(),
                             escher_map.reaction_identifiers(options.reaction_identifier),
                             edge_weights=edge_weights)
        options = options.with_updates(reaction_edge_widths=styles.widths,
                                       reaction_edge_colors=styles.colors)
    if args.format == 'geojson':
        backend = GeoJSONBackend()
    else:
        resolution = escher_map.resolution
        view_box = None
        if None not in (resolution.x, resolution.y, resolution.width, resolution.height):
            view_box = (resolution.x, resolution.y, resolution.width, resolution.height)
        backend = SVGBackend(view_box=view_box, transparent=args.transparent)
    escher_map.render(options).draw(backend)
    backend.save(args.output)
    log.info('Saved drawing', output=args.output, format=args.format)

#===============================================================================

def main(argv=None):
    parser = arg_parser()
    args = parser.parse_args(argv)
    if args.silent and args.logFile is None:
        parser.error('`--silent` option requires `--log LOG_FILE` to be given')
    if args.edgeWeights and not args.fluxes:
        parser.error('`--edge-weights` option requires `--fluxes FLUX_FILE` to be given')
    configure_logging(args.logFile, verbose=args.verbose, silent=args.silent, debug=args.debug)
    try:
        make_drawing(args)
    except Exception as error:
        msg = str(error)
        log.exception(msg, exc_info=True)
        sys.exit(1)

#===============================================================================

if __name__ == '__main__':
    main()

#===============================================================================
