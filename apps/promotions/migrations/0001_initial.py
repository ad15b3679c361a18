from django.conf import settings
from django.db import migrations, models
import django.db.models.deletion
import django.utils.timezone


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('articles', '0001_initial'),
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='BreakingPromotion',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('starts_at', models.DateTimeField(db_index=True, default=django.utils.timezone.now, verbose_name='Starts At')),
                ('ends_at', models.DateTimeField(blank=True, help_text='Leave empty for no expiry', null=True, verbose_name='Ends At')),
                ('manually_removed', models.BooleanField(default=False, verbose_name='Manually Removed')),
                ('created_at', models.DateTimeField(default=django.utils.timezone.now, editable=False)),
                ('priority', models.CharField(blank=True, choices=[('urgent', 'Urgent'), ('high', 'High'), ('medium', 'Medium'), ('low', 'Low')], max_length=10, null=True, verbose_name='Priority')),
                ('article', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='breaking_promotions', to='articles.article', verbose_name='Article')),
                ('created_by', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='+', to=settings.AUTH_USER_MODEL, verbose_name='Created By')),
            ],
            options={
                'verbose_name': 'Breaking Promotion',
                'verbose_name_plural': 'Breaking Promotions',
                'db_table': 'breaking_news',
            },
        ),
        migrations.CreateModel(
            name='PinnedPromotion',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('starts_at', models.DateTimeField(db_index=True, default=django.utils.timezone.now, verbose_name='Starts At')),
                ('ends_at', models.DateTimeField(blank=True, help_text='Leave empty for no expiry', null=True, verbose_name='Ends At')),
                ('manually_removed', models.BooleanField(default=False, verbose_name='Manually Removed')),
                ('created_at', models.DateTimeField(default=django.utils.timezone.now, editable=False)),
                ('tier', models.CharField(blank=True, choices=[('gold', 'Gold'), ('silver', 'Silver'), ('bronze', 'Bronze')], max_length=10, null=True, verbose_name='Tier')),
                ('position', models.IntegerField(blank=True, help_text='Lower positions show first; empty positions show last', null=True, verbose_name='Position')),
                ('article', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='pinned_promotions', to='articles.article', verbose_name='Article')),
                ('created_by', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='+', to=settings.AUTH_USER_MODEL, verbose_name='Created By')),
            ],
            options={
                'verbose_name': 'Pinned Promotion',
                'verbose_name_plural': 'Pinned Promotions',
                'db_table': 'pinned_news',
            },
        ),
    ]
