"""Write the OpenAPI schema of the Lumina API to a json file."""

import typing as t
from pathlib import Path

import orjson
from django.conf import settings
from django.core.management.base import BaseCommand, CommandParser

from api.api import api


class Command(BaseCommand):
    help = "Write the OpenAPI schema to a json file."

    def add_arguments(self, parser: CommandParser) -> None:
        """Add the output path argument."""
        parser.add_argument(
            "--output",
            default=str(settings.BASE_DIR.parent / ".artifacts" / "openapi.json"),
            help="Where to write the schema.",
        )

    def handle(self, *args: t.Any, **options: t.Any) -> None:
        """Serialize the schema with orjson and write it out."""
        output_file = Path(options["output"])
        output_file.parent.mkdir(parents=True, exist_ok=True)
        schema = api.get_openapi_schema()
        output_file.write_bytes(orjson.dumps(schema, option=orjson.OPT_INDENT_2, default=str))
        self.stdout.write(self.style.SUCCESS(f"OpenAPI schema dumped to {output_file}"))
