"""
cli/ - 命令行工具
"""
