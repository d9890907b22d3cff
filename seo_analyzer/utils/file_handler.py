"""
File handler for I/O operations.

Reads analysis inputs and writes analysis reports.
"""

import json
import re
from datetime import datetime
from pathlib import Path
from typing import Any

import yaml

from seo_analyzer.utils.logger import setup_logger


logger = setup_logger(__name__)


class FileHandler:
    """Handler for file I/O operations."""
    
    @staticmethod
    def read_file(file_path: Path) -> str:
        """
        Read file contents.
        
        Args:
            file_path: Path to the file
            
        Returns:
            File contents as string
            
        Raises:
            FileNotFoundError: If file doesn't exist
        """
        logger.debug(f"Reading file: {file_path}")
        
        if not file_path.exists():
            raise FileNotFoundError(f"File not found: {file_path}")
        
        with open(file_path, 'r', encoding='utf-8') as f:
            content = f.read()
        
        logger.debug(f"Read {len(content)} characters from {file_path}")
        return content
    
    @staticmethod
    def write_file(file_path: Path, content: str) -> None:
        """Write content to file, creating parent directories."""
        logger.debug(f"Writing to file: {file_path}")
        
        file_path.parent.mkdir(parents=True, exist_ok=True)
        
        with open(file_path, 'w', encoding='utf-8') as f:
            f.write(content)
        
        logger.debug(f"Wrote {len(content)} characters to {file_path}")
    
    @staticmethod
    def write_json(file_path: Path, data: dict[str, Any], indent: int = 2) -> None:
        """
        Write data to JSON file.
        
        Args:
            file_path: Path to JSON file
            data: Data to write
            indent: JSON indentation level
        """
        content = json.dumps(data, indent=indent, ensure_ascii=False)
        FileHandler.write_file(file_path, content)

    @staticmethod
    def read_yaml(file_path: Path) -> Any:
        """
        Read YAML file.
        
        Args:
            file_path: Path to YAML file
            
        Returns:
            Parsed YAML data (empty dict for an empty document)
        """
        content = FileHandler.read_file(file_path)
        data = yaml.safe_load(content)
        
        return data if data is not None else {}
    
    @staticmethod
    def write_yaml(file_path: Path, data: dict[str, Any]) -> None:
        """Write data to YAML file."""
        content = yaml.dump(
            data,
            default_flow_style=False,
            allow_unicode=True,
            sort_keys=False,
            width=120,
        )
        FileHandler.write_file(file_path, content)
    
    @staticmethod
    def slugify(text: str, max_length: int = 50) -> str:
        """
        Convert text to a filesystem-safe slug.
        
        Args:
            text: Text to slugify
            max_length: Maximum length of the slug
            
        Returns:
            Slugified string ("untitled" when nothing is left)
        """
        slug = re.sub(r"[^\w\s-]", "", text.lower())
        slug = re.sub(r"[-\s]+", "_", slug)
        slug = slug.strip("_")
        return slug[:max_length] or "untitled"

    @staticmethod
    def save_report(
        report: dict[str, Any],
        title: str,
        reports_dir: Path,
        fmt: str = "json",
        indent: int = 2,
    ) -> Path:
        """
        Save an analysis report next to earlier reports for the same title.
        
        Args:
            report: Serialized analysis result
            title: Content title, used for the file name
            reports_dir: Directory holding reports
            fmt: "json" or "yaml"
            indent: JSON indentation level
            
        Returns:
            Path of the written report
        """
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        file_path = reports_dir / f"{FileHandler.slugify(title)}_{timestamp}.{fmt}"
        
        data = {"analyzed_at": datetime.now().isoformat(), **report}
        if fmt == "yaml":
            FileHandler.write_yaml(file_path, data)
        elif fmt == "json":
            FileHandler.write_json(file_path, data, indent=indent)
        else:
            raise ValueError(f"Unsupported report format: {fmt}")
        
        logger.info(f"Saved analysis report to {file_path}")
        return file_path
