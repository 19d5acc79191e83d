from django.urls import path, include
from rest_framework.routers import DefaultRouter
from . import views

app_name = 'orders'

# Trailing slash is optional on every route.
#   GET  /api/orders/queue/          - Open orders, oldest first
#   PUT  /api/orders/{id}/complete/  - Complete an order
router = DefaultRouter()
router.trailing_slash = '/?'
router.register(r'orders', views.OrderViewSet, basename='order')

urlpatterns = [
    path('', include(router.urls)),
]
