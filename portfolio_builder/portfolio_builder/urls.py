from django.urls import path, include

urlpatterns = [
    path('', include('portfolio.urls')),
    path('profile/', include('profile_setup.urls')),
]
