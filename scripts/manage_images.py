#!/usr/bin/env python
"""Script to manage the shop's image library from the command line."""
from __future__ import annotations

import argparse
import asyncio
import json
import mimetypes
from pathlib import Path

from app.services.media_gateway import get_media_gateway


def _read_image(path: str) -> tuple[bytes, str, str]:
    file_path = Path(path)
    mime_type = mimetypes.guess_type(file_path.name)[0] or "application/octet-stream"
    return file_path.read_bytes(), file_path.name, mime_type


async def _run(args: argparse.Namespace) -> None:
    gateway = get_media_gateway()

    if args.command == "list":
        listing = await gateway.retrieve_all()
        print(json.dumps(listing, indent=2, default=str))
        return

    if args.command == "upload":
        data, filename, mime_type = _read_image(args.file)
        result = await gateway.create(data, filename, mime_type)
    elif args.command == "replace":
        data, _, mime_type = _read_image(args.file)
        result = await gateway.update(args.public_id, data, mime_type)
    else:
        result = await gateway.delete(args.public_id)
    print(result.model_dump_json(indent=2))


def main() -> None:
    parser = argparse.ArgumentParser(description="Manage shop images in the media store")
    sub = parser.add_subparsers(dest="command", required=True)

    upload = sub.add_parser("upload", help="Upload a new image")
    upload.add_argument("file")

    sub.add_parser("list", help="List images in the media folder")

    replace = sub.add_parser("replace", help="Overwrite an existing image")
    replace.add_argument("public_id")
    replace.add_argument("file")

    delete = sub.add_parser("delete", help="Delete an image")
    delete.add_argument("public_id")

    asyncio.run(_run(parser.parse_args()))


if __name__ == "__main__":
    main()
