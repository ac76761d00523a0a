from csspruner.stylesheet.extractor import RuleExtractor, extract_rules, read_stylesheet

__all__ = ["RuleExtractor", "extract_rules", "read_stylesheet"]
