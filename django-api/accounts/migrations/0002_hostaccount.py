from django.db import migrations, models


class Migration(migrations.Migration):

    dependencies = [
        ("accounts", "0001_initial"),
    ]

    operations = [
        migrations.CreateModel(
            name="HostAccount",
            fields=[
                ("owner_id", models.CharField(max_length=128, primary_key=True, serialize=False)),
                ("name", models.CharField(max_length=200)),
                ("phone", models.CharField(blank=True, max_length=32, null=True)),
                ("is_host", models.BooleanField(default=False)),
                ("is_customer", models.BooleanField(default=False)),
                ("created_at", models.DateTimeField(blank=True, null=True)),
            ],
        ),
    ]
