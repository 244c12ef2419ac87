import django.db.models.deletion
import django.utils.timezone
import uuid
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

	initial = True

	dependencies = [
		migrations.swappable_dependency(settings.AUTH_USER_MODEL),
	]

	operations = [
		migrations.CreateModel(
			name='Ticket',
			fields=[
				('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
				('ticket_number', models.CharField(editable=False, max_length=32, unique=True)),
				('subject', models.CharField(max_length=200)),
				('description', models.TextField()),
				('category', models.CharField(max_length=100)),
				('priority', models.CharField(choices=[('Low', 'Low'), ('Medium', 'Medium'), ('High', 'High'), ('Urgent', 'Urgent')], default='Medium', max_length=20)),
				('status', models.CharField(choices=[('Open', 'Open'), ('In Progress', 'In Progress'), ('Resolved', 'Resolved'), ('Closed', 'Closed')], default='Open', max_length=20)),
				('customer_name', models.CharField(max_length=200)),
				('customer_email', models.EmailField(max_length=254)),
				('created_at', models.DateTimeField(db_index=True, default=django.utils.timezone.now)),
				('updated_at', models.DateTimeField(auto_now=True)),
				('assigned_to', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='assigned_tickets', to=settings.AUTH_USER_MODEL)),
			],
			options={
				'ordering': ['-created_at'],
				'indexes': [
					models.Index(fields=['status'], name='tickets_status_idx'),
					models.Index(fields=['priority'], name='tickets_priority_idx'),
					models.Index(fields=['category'], name='tickets_category_idx'),
				],
			},
		),
		migrations.CreateModel(
			name='TicketUpdate',
			fields=[
				('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
				('message', models.TextField()),
				('status', models.CharField(blank=True, choices=[('Open', 'Open'), ('In Progress', 'In Progress'), ('Resolved', 'Resolved'), ('Closed', 'Closed')], max_length=20, null=True)),
				('created_at', models.DateTimeField(db_index=True, default=django.utils.timezone.now)),
				('created_by', models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name='ticket_updates', to=settings.AUTH_USER_MODEL)),
				('ticket', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='updates', to='tickets.ticket')),
			],
			options={
				'ordering': ['-created_at'],
			},
		),
	]
