from django.urls import path, include
from rest_framework.routers import DefaultRouter
from . import views

app_name = 'baristas'

# Trailing slash is optional on every route.
router = DefaultRouter()
router.trailing_slash = '/?'
router.register(r'baristas', views.BaristaViewSet, basename='barista')

urlpatterns = [
    path('', include(router.urls)),
]
