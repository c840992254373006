from django.urls import path
from . import views

urlpatterns = [
    path('setup/', views.setup_state, name='profile_setup'),
    path('setup/complete/', views.complete_setup, name='profile_setup_complete'),
    path('setup/reset/', views.reset_setup, name='profile_setup_reset'),
    path('setup/<str:step_id>/', views.save_step, name='profile_setup_step'),
]
