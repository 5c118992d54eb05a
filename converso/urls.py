from django.contrib import admin
from django.urls import include, path

urlpatterns = [
    path("admin/", admin.site.urls),
    path("accounts/", include("users.urls")),
    path("accounts/", include("django.contrib.auth.urls")),
    path("companion/", include("companions.urls")),
    # 'dashboard:dashboard' is the LOGIN_REDIRECT_URL
    path("dashboard/", include("dashboard.urls")),
    path("", include("core.urls")),
]
