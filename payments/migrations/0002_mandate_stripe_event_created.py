"""
Record the creation time of the last applied mandate.updated event so
that events delivered out of order do not roll a mandate back.
"""
from django.db import migrations, models


class Migration(migrations.Migration):

    dependencies = [
        ("payments", "0001_initial"),
    ]

    operations = [
        migrations.AddField(
            model_name="mandate",
            name="stripe_event_created",
            field=models.DateTimeField(
                blank=True,
                help_text="Creation time of the last mandate.updated event applied",
                null=True,
            ),
        ),
    ]
