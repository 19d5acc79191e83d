from django.urls import path, include
from rest_framework.routers import DefaultRouter
from . import views

app_name = 'coffees'

# Trailing slash is optional on every route.
router = DefaultRouter()
router.trailing_slash = '/?'
router.register(r'coffees', views.CoffeeViewSet, basename='coffee')

urlpatterns = [
    path('', include(router.urls)),
]
