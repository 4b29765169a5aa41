"""
Routers layer
路由层
"""
