"""SmartBarber appointment booking API."""
