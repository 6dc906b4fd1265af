"""
plugins - AWS 분석 도구
"""
