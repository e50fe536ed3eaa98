from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Post",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("title", models.CharField(error_messages={"blank": "Please provide a title for this post", "max_length": "Title cannot be more than 100 characters"}, max_length=100)),
                ("content", models.TextField(error_messages={"blank": "Please provide content for this post"})),
                ("author", models.CharField(error_messages={"blank": "Please provide an author name", "max_length": "Author name cannot be more than 50 characters"}, max_length=50)),
                ("slug", models.CharField(blank=True, db_index=True, max_length=255)),
                ("excerpt", models.CharField(blank=True, error_messages={"max_length": "Excerpt cannot be more than 160 characters"}, max_length=160)),
                ("tags", models.JSONField(blank=True, default=list)),
                ("featured_image", models.CharField(blank=True, max_length=500)),
                ("seo_title", models.CharField(blank=True, error_messages={"max_length": "SEO title cannot be more than 60 characters"}, max_length=60)),
                ("seo_description", models.CharField(blank=True, error_messages={"max_length": "SEO description cannot be more than 160 characters"}, max_length=160)),
                ("created_at", models.DateTimeField(auto_now_add=True, db_index=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
            ],
            options={
                "ordering": ["-created_at", "-pk"],
            },
        ),
        migrations.AddConstraint(
            model_name="post",
            constraint=models.UniqueConstraint(
                condition=models.Q(("slug", ""), _negated=True),
                fields=("slug",),
                name="blog_cms_post_unique_slug",
            ),
        ),
    ]
