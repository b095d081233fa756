"""
The sweep service exposes no HTTP endpoints.
"""
urlpatterns = []
