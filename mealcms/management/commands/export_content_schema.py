"""
Export the registered content schema as JSON.

Writes {"components": {...}, "contentTypes": {...}} in the CMS JSON form,
for front-end type generation or review.

Usage:
    python manage.py export_content_schema
    python manage.py export_content_schema --output schema.json --indent 4
"""

import json

from django.core.management.base import BaseCommand, CommandError
from django.core.serializers.json import DjangoJSONEncoder

from mealcms.schema import registry


class Command(BaseCommand):
    help = "Export registered components and content types as JSON"

    def add_arguments(self, parser):
        parser.add_argument(
            "--output",
            "-o",
            help="Write to this file instead of stdout",
        )
        parser.add_argument(
            "--indent",
            type=int,
            default=2,
            help="JSON indentation (default: 2)",
        )
        parser.add_argument(
            "--check",
            action="store_true",
            help="Fail if the registry has consistency issues",
        )

    def handle(self, *args, **options):
        if options["check"]:
            result = registry.check()
            if not result.success:
                lines = [f"  {issue.path}: {issue.message}" for issue in result.issues]
                raise CommandError("Schema has consistency issues:\n" + "\n".join(lines))

        payload = json.dumps(
            registry.as_dict(),
            cls=DjangoJSONEncoder,
            indent=options["indent"],
        )

        if options["output"]:
            with open(options["output"], "w", encoding="utf-8") as fh:
                fh.write(payload + "\n")
            self.stdout.write(
                self.style.SUCCESS(
                    f"Exported {len(registry)} schemas to {options['output']}"
                )
            )
        else:
            self.stdout.write(payload)
