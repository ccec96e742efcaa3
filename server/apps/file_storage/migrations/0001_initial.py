from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='PaidNode',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('resource', models.CharField(help_text='Resource locator: {channel}:{path}', max_length=512, unique=True)),
                ('amount', models.PositiveBigIntegerField(help_text='Price in the smallest currency unit')),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('paid_users', models.ManyToManyField(blank=True, related_name='paid_nodes', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'verbose_name': 'Paid Node',
                'verbose_name_plural': 'Paid Nodes',
                'ordering': ['-created_at'],
            },
        ),
    ]
