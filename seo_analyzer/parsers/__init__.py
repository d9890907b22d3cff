"""YAML parsing module for analysis specifications."""

from .yaml_parser import AnalysisSpec, YAMLParser, parse_keywords

__all__ = ["AnalysisSpec", "YAMLParser", "parse_keywords"]
