"""HTTP前端模块"""
from .server import create_app, run_server

__all__ = ['create_app', 'run_server']
