from django.core.management.base import BaseCommand

from blogify.conf import blog_settings
from blogify.models import Tag


class Command(BaseCommand):
    help = "Inserts the default tag set when no tags exist yet."

    def add_arguments(self, parser):
        parser.add_argument(
            "-f",
            "--force",
            action="store_true",
            default=False,
            help="Add any missing default tags even if other tags already exist.",
            dest="force",
        )

    def handle(self, *args, **options):
        if Tag.objects.exists() and not options["force"]:
            self.stdout.write("Tags already exist, skipping default tags insertion.")
            return

        created = 0
        for default in blog_settings.DEFAULT_TAGS:
            _, was_created = Tag.objects.get_or_create(
                name=default["name"],
                defaults={
                    "description": default.get("description", ""),
                    "color": default.get("color") or blog_settings.DEFAULT_TAG_COLOR,
                },
            )
            created += int(was_created)

        self.stdout.write(f"Inserted {created} default tags.")
