from django.conf import settings
import django.core.serializers.json
from django.db import migrations, models
import django.db.models.deletion
import uuid


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('projects', '0001_initial'),
        ('tasks', '0001_initial'),
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='SuggestionRecord',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('suggestion_type', models.CharField(choices=[('priority', 'Priority'), ('time_estimate', 'Time estimate'), ('assignee', 'Assignee'), ('task_breakdown', 'Task breakdown'), ('task_suggestion', 'Task suggestion')], max_length=20, verbose_name='suggestion type')),
                ('suggestion_data', models.JSONField(encoder=django.core.serializers.json.DjangoJSONEncoder, help_text='The serialized generator result.', verbose_name='suggestion data')),
                ('context', models.JSONField(blank=True, default=dict, encoder=django.core.serializers.json.DjangoJSONEncoder, help_text='The input the suggestion was generated from.', verbose_name='context')),
                ('is_applied', models.BooleanField(default=False, verbose_name='is applied')),
                ('feedback', models.TextField(blank=True, null=True, verbose_name='feedback')),
                ('created_at', models.DateTimeField(auto_now_add=True, verbose_name='created at')),
                ('project', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='suggestions', to='projects.project', verbose_name='project')),
                ('task', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.CASCADE, related_name='suggestions', to='tasks.task', verbose_name='task')),
                ('user', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='suggestions', to=settings.AUTH_USER_MODEL, verbose_name='user')),
            ],
            options={
                'verbose_name': 'Suggestion record',
                'verbose_name_plural': 'Suggestion records',
                'db_table': 'ai_suggestions',
                'ordering': ['-created_at'],
            },
        ),
        migrations.AddIndex(
            model_name='suggestionrecord',
            index=models.Index(fields=['user', 'suggestion_type'], name='suggestion_user_type_idx'),
        ),
        migrations.AddIndex(
            model_name='suggestionrecord',
            index=models.Index(fields=['is_applied'], name='suggestion_applied_idx'),
        ),
        migrations.AddIndex(
            model_name='suggestionrecord',
            index=models.Index(fields=['created_at'], name='suggestion_created_idx'),
        ),
    ]
