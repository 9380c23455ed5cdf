#!/usr/bin/env python3

import logging
import pathlib

import typer

from sza.graphics.frame import pad_frames
from sza.graphics.image import DECODE_ERRORS, decode_image, encode_image
from sza.kernel.errors import AnimationError, MissingDescriptorError
from sza.kernel.fileio import ResourceStream
from sza.zipped.descriptor import parse_line, split_lines
from sza.zipped.preset import sza

app = typer.Typer()


@app.callback()
def main(
    verbose: bool = typer.Option(False, '--verbose', '-v', help='log every entry'),
) -> None:
    logging.basicConfig(level=logging.DEBUG if verbose else logging.WARNING)


@app.command()
def info(
    filename: pathlib.Path = typer.Argument(..., help='*.sza file to read from'),
) -> None:
    try:
        animation = sza.from_path(filename)
    except AnimationError as exc:
        typer.echo(f'{filename}: {exc}', err=True)
        raise typer.Exit(1) from exc

    typer.echo(f'size: {animation.width}x{animation.height}')
    typer.echo(f'frames: {len(animation)}')
    for idx, frame in enumerate(animation):
        typer.echo(f'FRAME {idx} - {frame.width}x{frame.height} {frame.duration_ms}ms')
    typer.echo(f'total: {animation.total_duration_ms}ms')


@app.command()
def entries(
    filename: pathlib.Path = typer.Argument(..., help='*.sza file to read from'),
    match: str = typer.Option('{}', help='entry name pattern, e.g. {}.png'),
) -> None:
    try:
        with ResourceStream.load(filename) as resource:
            contents = sza.read_entries(resource)
    except (OSError, AnimationError) as exc:
        typer.echo(f'{filename}: {exc}', err=True)
        raise typer.Exit(1) from exc

    for name in sza.findall(match, sorted(contents.images)):
        width, height = contents.images[name].size
        typer.echo(f'{name}: {width}x{height}')


@app.command()
def extract(
    filename: pathlib.Path = typer.Argument(..., help='*.sza file to read from'),
    outdir: pathlib.Path = typer.Option(pathlib.Path('.'), help='target directory'),
    scale: float = typer.Option(1.0, help='scale factor applied to every frame'),
    pad: bool = typer.Option(False, help='pad frames to the animation size'),
) -> None:
    try:
        animation = sza.from_path(filename)
        if scale != 1.0:
            animation = sza.scale(animation, scale)
    except AnimationError as exc:
        typer.echo(f'{filename}: {exc}', err=True)
        raise typer.Exit(1) from exc

    frames = pad_frames(animation.size, animation) if pad else iter(animation)
    outdir.mkdir(parents=True, exist_ok=True)
    for idx, frame in enumerate(frames):
        path = outdir / f'{filename.stem}_{idx:04d}_{frame.duration_ms}ms.png'
        sza.write_file(path, encode_image(frame.image))
        typer.echo(f'{path}')


@app.command()
def pack(
    descriptor: pathlib.Path = typer.Argument(
        ...,
        help='descriptor file, images are resolved next to it',
    ),
    output: pathlib.Path = typer.Option(..., '--output', '-o', help='*.sza file to write'),
) -> None:
    basedir = descriptor.parent
    frames = []
    try:
        text = sza.read_file(descriptor).decode(sza.encoding)
        for line in split_lines(text):
            name, duration = parse_line(line, descriptor.name)
            try:
                im = decode_image(sza.read_file(basedir / name))
            except DECODE_ERRORS as exc:
                typer.echo(f'{descriptor}: cannot read image {name}: {exc}', err=True)
                raise typer.Exit(1) from exc
            frames.append((name, im, duration))
        if not frames:
            raise MissingDescriptorError(descriptor.name)
        sza.write_file(output, sza.compose(frames))
    except (AnimationError, OSError, ValueError) as exc:
        typer.echo(f'{descriptor}: {exc}', err=True)
        raise typer.Exit(1) from exc
    typer.echo(f'{output}: {len(frames)} frames')


if __name__ == '__main__':
    app()
