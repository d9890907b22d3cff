"""
YAML parser for analysis specifications.

An analysis specification names the page to score:

    title: "Så skriver du bättre rubriker för SEO"
    meta_description: "..."
    target_keywords: ["seo", "rubriker"]   # or "seo, rubriker"
    url: https://example.com/blogg/rubriker
    content_file: rubriker.html            # or inline `content:`

``content_file`` is resolved relative to the YAML file.
"""

from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator, model_validator

from seo_analyzer.analysis.models import AnalysisInput
from seo_analyzer.utils.file_handler import FileHandler
from seo_analyzer.utils.logger import setup_logger


logger = setup_logger(__name__)


def parse_keywords(raw: Any) -> List[str]:
    """
    Normalize a keyword list.
    
    Accepts a list or a comma-separated string. Keywords are trimmed, empty
    entries are dropped and only the first occurrence of a duplicate is kept,
    so the primary keyword stays first.
    
    Args:
        raw: List of strings, comma-separated string or None
        
    Returns:
        Ordered list of unique keywords
    """
    if raw is None:
        return []
    if isinstance(raw, str):
        raw = raw.split(",")
    
    keywords: List[str] = []
    for item in raw:
        keyword = str(item).strip()
        if keyword and keyword not in keywords:
            keywords.append(keyword)
    return keywords


class AnalysisSpec(BaseModel):
    """Validated analysis specification from YAML."""
    
    title: str = Field(default="", description="Page title")
    meta_description: str = Field(default="", description="Meta description")
    target_keywords: List[str] = Field(default_factory=list, description="Target keywords")
    url: Optional[str] = Field(default=None, description="Page URL")
    content: Optional[str] = Field(default=None, description="Inline HTML content")
    content_file: Optional[Path] = Field(default=None, description="Path to an HTML file")
    
    @field_validator("title", "meta_description", mode="before")
    @classmethod
    def clean_text(cls, v: Any) -> str:
        """YAML null becomes an empty string."""
        return "" if v is None else str(v)
    
    @field_validator("target_keywords", mode="before")
    @classmethod
    def clean_keywords(cls, v: Any) -> List[str]:
        """Accept lists or comma-separated strings."""
        return parse_keywords(v)
    
    @model_validator(mode="after")
    def check_content_source(self) -> "AnalysisSpec":
        """Inline content and a content file are mutually exclusive."""
        if self.content is not None and self.content_file is not None:
            raise ValueError("Use either 'content' or 'content_file', not both")
        return self
    
    def to_input(self, base_dir: Path) -> AnalysisInput:
        """
        Load the content and build the analysis input.
        
        Args:
            base_dir: Directory that relative ``content_file`` paths resolve against
            
        Returns:
            AnalysisInput ready for analysis
        """
        content = self.content or ""
        if self.content_file is not None:
            path = self.content_file
            if not path.is_absolute():
                path = base_dir / path
            content = FileHandler.read_file(path)
        
        return AnalysisInput(
            content=content,
            title=self.title,
            meta_description=self.meta_description,
            target_keywords=self.target_keywords,
            url=self.url,
        )


class YAMLParser:
    """Parser for YAML analysis specifications."""
    
    @staticmethod
    def parse_file(file_path: Path) -> AnalysisInput:
        """
        Parse a YAML file and return the analysis input it describes.
        
        Args:
            file_path: Path to the YAML file
            
        Returns:
            AnalysisInput with the content loaded
            
        Raises:
            FileNotFoundError: If the YAML file or its content file doesn't exist
            ValueError: If the YAML is malformed or fails validation
        """
        logger.info(f"Parsing YAML file: {file_path}")
        
        if not file_path.exists():
            logger.error(f"File not found: {file_path}")
            raise FileNotFoundError(f"Input file not found: {file_path}")
        
        try:
            data = FileHandler.read_yaml(file_path)
        except yaml.YAMLError as e:
            logger.error(f"Invalid YAML syntax: {e}")
            raise ValueError(f"Invalid YAML syntax: {e}")
        
        if not isinstance(data, dict):
            logger.error("YAML root must be a dictionary")
            raise ValueError("YAML file must contain a dictionary at root level")
        
        try:
            spec = AnalysisSpec(**data)
        except ValidationError as e:
            logger.error(f"Validation error: {e}")
            raise ValueError(f"Invalid analysis specification: {e}")
        
        analysis_input = spec.to_input(file_path.parent)
        logger.info(
            f"Parsed analysis input '{analysis_input.title}' with "
            f"{len(analysis_input.target_keywords)} keywords"
        )
        return analysis_input
    
    @staticmethod
    def validate_yaml_structure(data: Dict[str, Any]) -> List[str]:
        """
        Validate YAML structure and return list of issues.
        
        Args:
            data: Parsed YAML data
            
        Returns:
            List of validation error messages (empty if valid)
        """
        issues = []
        
        for field in ("title", "meta_description", "url", "content"):
            if field in data and data[field] is not None and not isinstance(data[field], str):
                issues.append(f"Field '{field}' must be a string")
        
        keywords = data.get("target_keywords")
        if keywords is not None:
            if isinstance(keywords, list):
                for i, item in enumerate(keywords):
                    if not isinstance(item, str):
                        issues.append(f"Keyword {i+1} must be a string")
            elif not isinstance(keywords, str):
                issues.append("Field 'target_keywords' must be a list or a comma-separated string")
        
        if data.get("content") is not None and data.get("content_file") is not None:
            issues.append("Use either 'content' or 'content_file', not both")
        
        unknown = sorted(set(data) - set(AnalysisSpec.model_fields))
        for key in unknown:
            issues.append(f"Unknown field: '{key}'")
        
        return issues
