from django.conf import settings
from django.db import migrations, models
import django.db.models.deletion


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='Companion',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('name', models.CharField(max_length=100, verbose_name='Companion Name')),
                ('subject', models.CharField(choices=[('maths', 'Maths'), ('language', 'Language'), ('science', 'Science'), ('history', 'History'), ('coding', 'Coding'), ('economics', 'Economics')], max_length=50, verbose_name='Subject')),
                ('topic', models.CharField(max_length=255, verbose_name='Topic')),
                ('voice', models.CharField(choices=[('male', 'Male'), ('female', 'Female')], default='female', max_length=10, verbose_name='Voice')),
                ('style', models.CharField(choices=[('formal', 'Formal'), ('casual', 'Casual')], default='casual', max_length=10, verbose_name='Style')),
                ('duration', models.PositiveIntegerField(default=15, help_text='Estimated session length in minutes.')),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('author', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='companions', to=settings.AUTH_USER_MODEL, verbose_name='Author')),
            ],
            options={
                'ordering': ['-created_at'],
            },
        ),
        migrations.CreateModel(
            name='SessionHistory',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('companion', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='sessions', to='companions.companion')),
                ('user', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='session_history', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'verbose_name_plural': 'Session history',
                'ordering': ['-created_at'],
            },
        ),
    ]
