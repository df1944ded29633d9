from django.db import migrations, models

STATUS_CHOICES = [("draft", "Draft"), ("published", "Published")]


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="OwnedEvent",
            fields=[
                (
                    "id",
                    models.BigAutoField(
                        auto_created=True, primary_key=True, serialize=False, verbose_name="ID"
                    ),
                ),
                ("host_uid", models.CharField(db_index=True, max_length=128)),
                ("status", models.CharField(choices=STATUS_CHOICES, max_length=16)),
                ("basic_details", models.JSONField(default=dict)),
                ("schedule", models.JSONField(default=dict)),
                ("tickets", models.JSONField(default=dict)),
                ("created_at", models.DateTimeField()),
                ("updated_at", models.DateTimeField()),
                ("published_at", models.DateTimeField(blank=True, null=True)),
                ("event_id", models.CharField(max_length=64)),
            ],
            options={
                "ordering": ["-updated_at"],
            },
        ),
        migrations.CreateModel(
            name="PublishedEvent",
            fields=[
                ("host_uid", models.CharField(db_index=True, max_length=128)),
                ("status", models.CharField(choices=STATUS_CHOICES, max_length=16)),
                ("basic_details", models.JSONField(default=dict)),
                ("schedule", models.JSONField(default=dict)),
                ("tickets", models.JSONField(default=dict)),
                ("created_at", models.DateTimeField()),
                ("updated_at", models.DateTimeField()),
                ("published_at", models.DateTimeField(blank=True, null=True)),
                (
                    "event_id",
                    models.CharField(max_length=64, primary_key=True, serialize=False),
                ),
            ],
            options={
                "ordering": ["-published_at"],
            },
        ),
        migrations.AddConstraint(
            model_name="ownedevent",
            constraint=models.UniqueConstraint(
                fields=("host_uid", "event_id"), name="unique_owned_event"
            ),
        ),
    ]
