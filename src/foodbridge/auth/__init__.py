"""Admin authentication"""
