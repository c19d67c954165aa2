import django.core.validators
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Ville",
            fields=[
                ("id", models.BigAutoField(primary_key=True, serialize=False)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("nom", models.CharField(db_index=True, max_length=100)),
                ("code_postal_principal", models.CharField(blank=True, max_length=5)),
                ("departement", models.CharField(blank=True, max_length=3)),
                ("region", models.CharField(blank=True, max_length=100)),
                (
                    "lat",
                    models.FloatField(
                        blank=True,
                        help_text="Latitude",
                        null=True,
                        validators=[
                            django.core.validators.MinValueValidator(-90),
                            django.core.validators.MaxValueValidator(90),
                        ],
                    ),
                ),
                (
                    "lng",
                    models.FloatField(
                        blank=True,
                        help_text="Longitude",
                        null=True,
                        validators=[
                            django.core.validators.MinValueValidator(-180),
                            django.core.validators.MaxValueValidator(180),
                        ],
                    ),
                ),
                (
                    "population",
                    models.PositiveIntegerField(
                        default=0, help_text="Population (données INSEE)",
                    ),
                ),
            ],
            options={
                "verbose_name": "Ville",
                "verbose_name_plural": "Villes",
                "ordering": ["id"],
            },
        ),
    ]
