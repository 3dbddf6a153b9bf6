from django.core.management.base import BaseCommand

from core.changelog import run_changelogs


class Command(BaseCommand):
    help = "Creates MongoDB indexes and seeds currencies and default categories."

    def handle(self, *args, **options):
        inserted = run_changelogs()
        for collection, count in inserted.items():
            self.stdout.write(f"{collection}: {count} inserted")
        self.stdout.write(self.style.SUCCESS("Reference data is up to date"))
