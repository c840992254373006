from django.urls import path
from . import views

urlpatterns = [
    path('api/templates/', views.template_list, name='template_list'),
    path('api/templates/<str:template_id>/', views.template_detail, name='template_detail'),

    path('api/config/', views.app_config, name='app_config'),

    path('api/portfolios/', views.portfolio_list, name='portfolio_list'),
    path('api/portfolios/current/', views.current_portfolio, name='current_portfolio'),
    path('api/portfolios/<str:portfolio_id>/', views.portfolio_detail, name='portfolio_detail'),
    path('api/portfolios/<str:portfolio_id>/duplicate/', views.duplicate_portfolio, name='duplicate_portfolio'),
    path('api/portfolios/<str:portfolio_id>/theme/', views.apply_theme, name='apply_theme'),

    path('api/preferences/', views.preferences, name='preferences'),
    path('api/draft/', views.draft, name='draft'),
    path('api/storage/export/', views.storage_export, name='storage_export'),
    path('api/storage/import/', views.storage_import, name='storage_import'),
    path('api/storage/clear/', views.storage_clear, name='storage_clear'),

    path('api/portfolio/render', views.render_portfolio, name='render_portfolio'),
    path('api/portfolio/export', views.export_portfolio, name='export_portfolio'),
    path('api/portfolio/assets', views.process_assets, name='process_assets'),
    path('api/preview/<str:portfolio_id>', views.preview_portfolio, name='preview_portfolio'),
]
