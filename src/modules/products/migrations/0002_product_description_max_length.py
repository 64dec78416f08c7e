from django.db import migrations, models
from django.db.models.functions import Length

models.CharField.register_lookup(Length)


class Migration(migrations.Migration):

    dependencies = [
        ("products", "0001_initial"),
    ]

    operations = [
        migrations.AddConstraint(
            model_name="product",
            constraint=models.CheckConstraint(
                condition=models.Q(description__isnull=True)
                | models.Q(description__length__lte=1000),
                name="products_description_max_1000",
            ),
        ),
    ]
