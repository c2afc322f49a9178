"""Command-line interface for shapekit."""

import logging
import sys
import click

from .geometry import (
    Point,
    Segment,
    Line,
    Ray,
    Circle,
    CoordinateRangeError,
    check_coordinates,
    shape_coordinates,
)

SHAPE_KINDS = {
    'point': ('x,y', 'The point itself'),
    'segment': ('x,y x,y', 'Closed segment between two points'),
    'line': ('x,y x,y', 'Infinite line through two points'),
    'ray': ('x,y x,y', 'Half-line from the first point through the second'),
    'circle': ('x,y RADIUS', 'Circle with integer center and radius'),
}


class CoordinateType(click.ParamType):
    """Parses `x,y` into a Point."""
    name = 'x,y'

    def convert(self, value, param, ctx):
        if isinstance(value, Point):
            return value
        try:
            x, y = (int(part) for part in value.split(','))
        except ValueError:
            self.fail(f"{value!r} is not an integer coordinate pair x,y", param, ctx)
        return Point(x, y)


COORDINATE = CoordinateType()

# Positional values like -1,0 would otherwise parse as unknown options
SIGNED_ARGS = {'ignore_unknown_options': True}


def build_shape(kind, values):
    """Build a shape of `kind` from its raw command-line values."""
    expected = len(SHAPE_KINDS[kind][0].split())
    if len(values) != expected:
        raise click.BadParameter(
            f"{kind} takes {SHAPE_KINDS[kind][0]}, got {len(values)} value(s)",
            param_hint='VALUES',
        )

    first = COORDINATE.convert(values[0], None, None)

    if kind == 'point':
        return first
    if kind == 'circle':
        try:
            radius = int(values[1])
        except ValueError:
            raise click.BadParameter(f"radius {values[1]!r} is not an integer",
                                     param_hint='VALUES')
        return Circle(first, radius)

    second = COORDINATE.convert(values[1], None, None)
    if kind == 'segment':
        return Segment(first, second)
    if kind == 'line':
        return Line.through(first, second)
    return Ray(first, second)


def validate(ctx, *shapes):
    """Range-check every shape unless the group was run with --unchecked."""
    if ctx.obj.get('unchecked'):
        return
    try:
        for shape in shapes:
            check_coordinates(*shape_coordinates(shape))
    except CoordinateRangeError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


def echo_bool(value):
    click.echo('true' if value else 'false')


@click.group()
@click.version_option()
@click.option('--verbose', '-v', is_flag=True, help='Log debug output to stderr')
@click.option('--unchecked', is_flag=True,
              help='Skip the safe coordinate range check')
@click.pass_context
def main(ctx, verbose, unchecked):
    """shapekit: exact integer geometry predicates.

    Coordinates are written as x,y.

    Examples:

        shapekit contains segment 0,0 2,2 --point 1,1

        shapekit cross circle 0,0 5 --segment 0,0 9,9

        shapekit distance 0,0 4,0 --point 2,3
    """
    if verbose:
        logging.basicConfig(level=logging.DEBUG, stream=sys.stderr)
    ctx.ensure_object(dict)
    ctx.obj['unchecked'] = unchecked


@main.command(context_settings=SIGNED_ARGS)
@click.argument('kind', type=click.Choice(sorted(SHAPE_KINDS)))
@click.argument('values', nargs=-1, required=True)
@click.option('--point', '-p', 'point', required=True, type=COORDINATE,
              help='Point to test')
@click.pass_context
def contains(ctx, kind, values, point):
    """Check whether a shape contains a point (boundary inclusive)."""
    shape = build_shape(kind, values)
    validate(ctx, shape, point)
    echo_bool(shape.contains_point(point))


@main.command(context_settings=SIGNED_ARGS)
@click.argument('kind', type=click.Choice(sorted(SHAPE_KINDS)))
@click.argument('values', nargs=-1, required=True)
@click.option('--segment', '-s', 'segment', required=True, nargs=2, type=COORDINATE,
              help='Segment endpoints')
@click.pass_context
def cross(ctx, kind, values, segment):
    """Check whether a shape shares at least one point with a segment."""
    shape = build_shape(kind, values)
    segment = Segment(*segment)
    validate(ctx, shape, segment)
    echo_bool(shape.cross_segment(segment))


@main.command(context_settings=SIGNED_ARGS)
@click.argument('start', type=COORDINATE)
@click.argument('finish', type=COORDINATE)
@click.option('--point', '-p', 'point', required=True, type=COORDINATE,
              help='Point to measure from')
@click.option('--precision', default=6, type=int, show_default=True,
              help='Decimal places to print')
@click.pass_context
def distance(ctx, start, finish, point, precision):
    """Distance from a point to the segment START-FINISH."""
    segment = Segment(start, finish)
    validate(ctx, segment, point)
    click.echo(f"{segment.distance_to(point):.{precision}f}")


@main.command()
def shapes():
    """List available shape kinds."""
    click.echo("Available shapes:")
    click.echo()
    for kind, (args, description) in sorted(SHAPE_KINDS.items()):
        click.echo(f"  {kind:<8} {args:<12} {description}")
    click.echo()
    click.echo("Use: shapekit contains <shape> <values> --point x,y")


if __name__ == '__main__':
    main()
