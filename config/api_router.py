from ippweek.location.api.urls import urlpatterns as location_urlpatterns

# The entity viewsets bind their actions by hand (see CRUDViewSet), so no
# DRF router here.
app_name = "api"
urlpatterns = [
    *location_urlpatterns,
]
