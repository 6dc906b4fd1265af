# core/region - 리전 검증
"""
리전 이름 검증 모듈

Usage:
    from core.region import validate_region, validate_regions
"""

from .availability import REGION_PATTERN, get_known_regions, validate_region, validate_regions

__all__ = ["REGION_PATTERN", "get_known_regions", "validate_region", "validate_regions"]
