from django.urls import path
from . import views

urlpatterns = [
	path("tickets", views.TicketCollectionView.as_view(), name="tickets"),
	path("tickets/ticket/<str:ticket_number>", views.ticket_by_number, name="ticket_by_number"),
	path("tickets/technicians", views.technicians, name="ticket_technicians"),
	path("tickets/<str:ticket_id>", views.ticket_detail, name="ticket_detail"),
	path("tickets/<str:ticket_id>/updates", views.ticket_updates, name="ticket_updates"),
]
