from typing import Dict, List, Optional


def format_label_selector(match_labels: Optional[Dict[str, str]]) -> str:
    """Renders labels as a Kubernetes selector string: ``k1=v1,k2=v2`` with keys sorted."""
    if not match_labels:
        return ""
    return ",".join(f"{key}={value}" for key, value in sorted(match_labels.items()))


def format_selector_requirement(key: str, operator: str, values: Optional[List[str]] = None) -> str:
    """
    Renders one ``matchExpressions`` entry in selector string syntax.

    Raises:
        ValueError: For an operator the label selector grammar does not know.
    """
    if operator == "In":
        return f"{key} in ({','.join(values or [])})"
    if operator == "NotIn":
        return f"{key} notin ({','.join(values or [])})"
    if operator == "Exists":
        return key
    if operator == "DoesNotExist":
        return f"!{key}"
    raise ValueError(f"Unsupported label selector operator '{operator}'")


def label_selector_to_string(selector) -> str:
    """
    Renders a V1LabelSelector (matchLabels and matchExpressions) as a selector string.
    """
    if selector is None:
        return ""

    parts = []
    labels = format_label_selector(selector.match_labels)
    if labels:
        parts.append(labels)
    for expression in selector.match_expressions or []:
        parts.append(format_selector_requirement(expression.key, expression.operator, expression.values))
    return ",".join(parts)
