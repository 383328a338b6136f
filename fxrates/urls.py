from django.urls import include, path

urlpatterns = [
    path("api/", include("currencies.api.urls")),
]
