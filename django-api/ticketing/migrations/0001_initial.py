import uuid

from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Event",
            fields=[
                (
                    "id",
                    models.UUIDField(
                        default=uuid.uuid4,
                        editable=False,
                        primary_key=True,
                        serialize=False,
                    ),
                ),
                ("title", models.CharField(max_length=255)),
                ("description", models.TextField(blank=True)),
                ("category", models.CharField(max_length=100)),
                ("location", models.CharField(max_length=255)),
                (
                    "price",
                    models.CharField(
                        help_text='Display price, e.g. "$149.99"', max_length=32
                    ),
                ),
                ("image_url", models.URLField(blank=True, max_length=500)),
                ("starts_at", models.DateTimeField()),
                ("created_at", models.DateTimeField(auto_now_add=True)),
            ],
            options={
                "ordering": ["starts_at"],
                "indexes": [
                    models.Index(
                        fields=["category", "starts_at"],
                        name="ticketing_event_category_idx",
                    )
                ],
            },
        ),
    ]
