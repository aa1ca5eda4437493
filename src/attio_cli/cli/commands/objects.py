"""
Object and attribute schema commands.

Provides ``objects`` and ``attributes`` command groups for inspecting the
workspace's data model.
"""

from __future__ import annotations

from typing import Annotated

import typer

from attio_cli.cli.utils import get_client, render_list, render_single
from attio_cli.services.objects import AttributeService, ObjectService

app = typer.Typer(help="Manage workspace objects")
attributes_app = typer.Typer(help="Manage object attributes")

ObjectArgument = Annotated[str, typer.Argument(help="Object API slug (e.g. people, companies)")]


@app.command("list")
def list_objects(ctx: typer.Context) -> None:
    """List all objects in the workspace."""
    objects = ObjectService(get_client(ctx)).list()
    render_list(ctx, objects, columns=["api_slug", "singular_noun", "plural_noun"], id_field="api_slug")


@app.command("get")
def get_object(ctx: typer.Context, slug: ObjectArgument) -> None:
    """Get details of a specific object."""
    render_single(ctx, ObjectService(get_client(ctx)).get(slug), id_field="api_slug")


@attributes_app.command("list")
def list_attributes(ctx: typer.Context, object: ObjectArgument) -> None:
    """List attributes for an object."""
    attributes = AttributeService(get_client(ctx), object).list()
    render_list(
        ctx,
        attributes,
        columns=["api_slug", "title", "type", "is_required", "is_unique", "is_multiselect"],
        id_field="api_slug",
    )
