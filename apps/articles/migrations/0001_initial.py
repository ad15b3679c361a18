from django.conf import settings
import django.core.validators
from django.db import migrations, models
import django.db.models.deletion
import django.utils.timezone


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='Category',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('created_at', models.DateTimeField(default=django.utils.timezone.now, editable=False, help_text='Timestamp when record was created', verbose_name='Created At')),
                ('updated_at', models.DateTimeField(auto_now=True, help_text='Timestamp when record was last updated', verbose_name='Updated At')),
                ('name', models.CharField(max_length=100, verbose_name='Name')),
                ('slug', models.SlugField(max_length=120, unique=True, verbose_name='Slug')),
                ('description', models.TextField(blank=True, verbose_name='Description')),
                ('color', models.CharField(blank=True, help_text='Hex color used by the front end, e.g. #6366f1', max_length=20, verbose_name='Color')),
                ('icon', models.CharField(blank=True, max_length=20, verbose_name='Icon')),
                ('is_active', models.BooleanField(db_index=True, default=True, verbose_name='Active')),
                ('display_order', models.IntegerField(default=0, verbose_name='Display Order')),
                ('parent', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='children', to='articles.category', verbose_name='Parent Category')),
            ],
            options={
                'verbose_name': 'Category',
                'verbose_name_plural': 'Categories',
                'db_table': 'categories',
                'ordering': ['display_order', 'name'],
            },
        ),
        migrations.CreateModel(
            name='Article',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('created_at', models.DateTimeField(default=django.utils.timezone.now, editable=False, help_text='Timestamp when record was created', verbose_name='Created At')),
                ('updated_at', models.DateTimeField(auto_now=True, help_text='Timestamp when record was last updated', verbose_name='Updated At')),
                ('title', models.CharField(max_length=500, verbose_name='Title')),
                ('slug', models.SlugField(help_text='Derived from the title plus a base36 timestamp suffix', max_length=200, unique=True, verbose_name='Slug')),
                ('content', models.TextField(help_text='Raw body as submitted, including formatting markers', verbose_name='Content')),
                ('processed_content', models.TextField(blank=True, help_text='Display body with formatting markers rendered to HTML', verbose_name='Processed Content')),
                ('excerpt', models.TextField(blank=True, verbose_name='Excerpt')),
                ('priority', models.CharField(choices=[('low', 'Low'), ('medium', 'Medium'), ('high', 'High'), ('urgent', 'Urgent')], default='medium', max_length=10, verbose_name='Priority')),
                ('reading_time', models.PositiveIntegerField(default=1, help_text='Estimated reading time in minutes', validators=[django.core.validators.MinValueValidator(1)], verbose_name='Reading Time')),
                ('status', models.CharField(choices=[('draft', 'Draft'), ('pending_approval', 'Pending Approval'), ('published', 'Published'), ('archived', 'Archived')], db_index=True, default='draft', max_length=20, verbose_name='Status')),
                ('views', models.PositiveIntegerField(default=0, verbose_name='Views')),
                ('likes_count', models.PositiveIntegerField(default=0, verbose_name='Likes')),
                ('comments_count', models.PositiveIntegerField(default=0, verbose_name='Comments')),
                ('share_count', models.PositiveIntegerField(default=0, verbose_name='Shares')),
                ('quotes_data', models.JSONField(blank=True, default=list, help_text='Quotes extracted from the raw body on the last write', verbose_name='Quotes')),
                ('image_url', models.CharField(blank=True, help_text='Mirror of the featured media asset url', max_length=1000, verbose_name='Cover Image URL')),
                ('tags', models.TextField(blank=True, help_text='Comma separated', verbose_name='Tags')),
                ('meta_description', models.TextField(blank=True, verbose_name='Meta Description')),
                ('seo_keywords', models.TextField(blank=True, verbose_name='SEO Keywords')),
                ('published_at', models.DateTimeField(blank=True, db_index=True, help_text='Set the first time the article is published, never cleared', null=True, verbose_name='Published At')),
                ('author', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='articles', to=settings.AUTH_USER_MODEL, verbose_name='Author')),
                ('primary_category', models.ForeignKey(blank=True, help_text='Mirrors the primary category link', null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='primary_articles', to='articles.category', verbose_name='Primary Category')),
            ],
            options={
                'verbose_name': 'Article',
                'verbose_name_plural': 'Articles',
                'db_table': 'articles',
                'ordering': ['-created_at'],
                'indexes': [
                    models.Index(fields=['status', 'published_at'], name='articles_status_pub_idx'),
                    models.Index(fields=['priority'], name='articles_priority_idx'),
                ],
            },
        ),
        migrations.CreateModel(
            name='ArticleCategory',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('is_primary', models.BooleanField(default=False, verbose_name='Primary')),
                ('article', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='category_links', to='articles.article', verbose_name='Article')),
                ('category', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='article_links', to='articles.category', verbose_name='Category')),
            ],
            options={
                'verbose_name': 'Article Category',
                'verbose_name_plural': 'Article Categories',
                'db_table': 'article_categories',
                'constraints': [
                    models.UniqueConstraint(fields=('article', 'category'), name='unique_article_category'),
                    models.UniqueConstraint(condition=models.Q(('is_primary', True)), fields=('article',), name='unique_primary_category_per_article'),
                ],
            },
        ),
        migrations.CreateModel(
            name='ArticleMedia',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('created_at', models.DateTimeField(default=django.utils.timezone.now, editable=False, help_text='Timestamp when record was created', verbose_name='Created At')),
                ('updated_at', models.DateTimeField(auto_now=True, help_text='Timestamp when record was last updated', verbose_name='Updated At')),
                ('url', models.CharField(max_length=1000, verbose_name='URL')),
                ('caption', models.TextField(blank=True, verbose_name='Caption')),
                ('alt_text', models.CharField(blank=True, max_length=500, verbose_name='Alt Text')),
                ('display_order', models.IntegerField(default=0, verbose_name='Display Order')),
                ('is_featured', models.BooleanField(default=False, verbose_name='Featured')),
                ('width', models.PositiveIntegerField(blank=True, null=True)),
                ('height', models.PositiveIntegerField(blank=True, null=True)),
                ('file_size', models.PositiveBigIntegerField(blank=True, null=True)),
                ('mime_type', models.CharField(blank=True, max_length=100, verbose_name='MIME Type')),
                ('storage_provider', models.CharField(blank=True, max_length=50, verbose_name='Storage Provider')),
                ('storage_id', models.CharField(blank=True, help_text='Provider-side identifier of the stored file', max_length=500, verbose_name='Storage ID')),
                ('metadata', models.JSONField(blank=True, default=dict, help_text='originalname, filename, has_watermark', verbose_name='Metadata')),
                ('article', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='media', to='articles.article', verbose_name='Article')),
            ],
            options={
                'verbose_name': 'Article Media',
                'verbose_name_plural': 'Article Media',
                'db_table': 'article_media',
                'ordering': ['display_order', 'id'],
                'constraints': [
                    models.UniqueConstraint(condition=models.Q(('is_featured', True)), fields=('article',), name='unique_featured_media_per_article'),
                ],
            },
        ),
        migrations.CreateModel(
            name='ArticleSocialLink',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('created_at', models.DateTimeField(default=django.utils.timezone.now, editable=False, help_text='Timestamp when record was created', verbose_name='Created At')),
                ('updated_at', models.DateTimeField(auto_now=True, help_text='Timestamp when record was last updated', verbose_name='Updated At')),
                ('platform', models.CharField(default='youtube_video', max_length=50, verbose_name='Platform')),
                ('post_type', models.CharField(default='video', max_length=50, verbose_name='Post Type')),
                ('url', models.CharField(max_length=1000, verbose_name='URL')),
                ('display_order', models.IntegerField(default=1, verbose_name='Display Order')),
                ('auto_embed', models.BooleanField(default=True, verbose_name='Auto Embed')),
                ('show_full_embed', models.BooleanField(default=True, verbose_name='Show Full Embed')),
                ('is_featured', models.BooleanField(default=False, verbose_name='Featured')),
                ('caption', models.TextField(blank=True, null=True, verbose_name='Caption')),
                ('article', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='social_links', to='articles.article', verbose_name='Article')),
            ],
            options={
                'verbose_name': 'Article Social Link',
                'verbose_name_plural': 'Article Social Links',
                'db_table': 'article_social_links',
                'ordering': ['display_order', 'id'],
            },
        ),
        migrations.CreateModel(
            name='ArticleApproval',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('created_at', models.DateTimeField(default=django.utils.timezone.now, editable=False, help_text='Timestamp when record was created', verbose_name='Created At')),
                ('updated_at', models.DateTimeField(auto_now=True, help_text='Timestamp when record was last updated', verbose_name='Updated At')),
                ('workflow_status', models.CharField(choices=[('pending_approval', 'Pending Approval'), ('approved', 'Approved'), ('rejected', 'Rejected'), ('changes_requested', 'Changes Requested')], db_index=True, default='pending_approval', max_length=30, verbose_name='Workflow Status')),
                ('submitted_at', models.DateTimeField(default=django.utils.timezone.now, verbose_name='Submitted At')),
                ('reviewed_at', models.DateTimeField(blank=True, null=True)),
                ('notes', models.TextField(blank=True)),
                ('article', models.OneToOneField(on_delete=django.db.models.deletion.CASCADE, related_name='approval', to='articles.article', verbose_name='Article')),
                ('reviewed_by', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='reviewed_approvals', to=settings.AUTH_USER_MODEL, verbose_name='Reviewed By')),
                ('submitted_by', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='submitted_approvals', to=settings.AUTH_USER_MODEL, verbose_name='Submitted By')),
            ],
            options={
                'verbose_name': 'Article Approval',
                'verbose_name_plural': 'Article Approvals',
                'db_table': 'article_approvals',
            },
        ),
        migrations.CreateModel(
            name='ArticleComment',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('created_at', models.DateTimeField(default=django.utils.timezone.now, editable=False, help_text='Timestamp when record was created', verbose_name='Created At')),
                ('updated_at', models.DateTimeField(auto_now=True, help_text='Timestamp when record was last updated', verbose_name='Updated At')),
                ('author_name', models.CharField(blank=True, max_length=200)),
                ('body', models.TextField()),
                ('is_approved', models.BooleanField(default=False)),
                ('article', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='comments', to='articles.article', verbose_name='Article')),
                ('user', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='article_comments', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'verbose_name': 'Article Comment',
                'verbose_name_plural': 'Article Comments',
                'db_table': 'article_comments',
            },
        ),
        migrations.CreateModel(
            name='ArticleLike',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('created_at', models.DateTimeField(default=django.utils.timezone.now)),
                ('article', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='likes', to='articles.article', verbose_name='Article')),
                ('user', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='article_likes', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'db_table': 'article_likes',
                'constraints': [
                    models.UniqueConstraint(fields=('article', 'user'), name='unique_article_like'),
                ],
            },
        ),
        migrations.CreateModel(
            name='ArticleView',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('ip_address', models.CharField(blank=True, max_length=100)),
                ('viewed_at', models.DateTimeField(db_index=True, default=django.utils.timezone.now)),
                ('article', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='view_records', to='articles.article', verbose_name='Article')),
                ('user', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='article_views', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'db_table': 'article_views',
            },
        ),
        migrations.CreateModel(
            name='SavedArticle',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('created_at', models.DateTimeField(default=django.utils.timezone.now)),
                ('article', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='saved_by', to='articles.article', verbose_name='Article')),
                ('user', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='saved_articles', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'db_table': 'saved_articles',
                'constraints': [
                    models.UniqueConstraint(fields=('article', 'user'), name='unique_saved_article'),
                ],
            },
        ),
    ]
