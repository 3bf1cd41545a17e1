"""
URL routing for the portal app
==============================

Maps URL patterns to view functions for:
- Root / locale home redirects
- Language switching
- OAuth callbacks and the sign-in landing
- Portal pages under a locale prefix
- API endpoints

Every page pattern starts with the locale segment captured as 'lang'.
"""

from django.urls import path
from . import views

app_name = 'portal'

urlpatterns = [
    # Root: redirect to the vote portal in the preferred locale
    path('', views.root_redirect, name='root'),

    # Language switch (locale-less, exempt from prefix enforcement)
    path('i18n/switch/', views.switch_language, name='switch_language'),

    # Podium API endpoint (JSON)
    path('api/podium/', views.podium_api, name='api_podium'),

    # OAuth callbacks (locale-less, as registered with the providers)
    path('auth/callback', views.auth_callback, name='auth_callback'),
    path('auth/callback/<str:provider>', views.auth_callback, name='auth_callback_provider'),

    # Locale home
    path('<str:lang>/', views.locale_home, name='locale_home'),

    # Portals
    path('<str:lang>/vote/', views.vote_podium, name='vote_podium'),
    path('<str:lang>/media/', views.media_landing, name='media_landing'),
    path('<str:lang>/shop/', views.shop_landing, name='shop_landing'),
    path('<str:lang>/mypage/', views.mypage_landing, name='mypage_landing'),

    # Sign-in landing for denied portal viewers
    path('<str:lang>/login/', views.sign_in, name='sign_in'),
]
