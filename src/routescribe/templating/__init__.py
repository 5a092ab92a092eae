"""Client rendering — turn a Structure into axios client source with kida.

The generated file exposes ``api.<entity>.<method>(...)`` functions that
substitute path parameters into the original route template and call the
matching axios verb.
"""

from routescribe.templating.client import ClientMethod, EntityBlock, render_client

__all__ = ["ClientMethod", "EntityBlock", "render_client"]
