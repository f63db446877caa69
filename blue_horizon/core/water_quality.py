"""
Water quality status classification for the latest reading
"""

from typing import Any, Dict, List, Optional

# Default thresholds (drinking-water guidance used by the dashboard)
THRESHOLDS = {
    'ph': {'min': 6.5, 'max': 8.5, 'critical_min': 6.0, 'critical_max': 9.0},
    'ntu': {'max': 5.0, 'critical': 10.0},
    'tds': {'max': 500, 'critical': 1000},
}

STATUS_ORDER = ('good', 'warning', 'critical')


def classify_parameter(parameter: str, value: float) -> str:
    """
    Calculate parameter status based on thresholds
    Returns: 'good', 'warning', or 'critical'
    """
    if parameter == 'ph':
        limits = THRESHOLDS['ph']
        if value < limits['critical_min'] or value > limits['critical_max']:
            return 'critical'
        if value < limits['min'] or value > limits['max']:
            return 'warning'
        return 'good'

    if parameter in ('ntu', 'tds'):
        limits = THRESHOLDS[parameter]
        if value > limits['critical']:
            return 'critical'
        if value > limits['max']:
            return 'warning'
        return 'good'

    return 'good'


def detect_issues(point: Dict[str, Any]) -> List[str]:
    """Human readable messages for readings outside the safe range"""
    issues = []

    ph = point.get('ph')
    if ph is not None and (ph < THRESHOLDS['ph']['min'] or ph > THRESHOLDS['ph']['max']):
        issues.append(
            f"pH level {ph:.1f} is outside safe range "
            f"({THRESHOLDS['ph']['min']}-{THRESHOLDS['ph']['max']})"
        )

    ntu = point.get('ntu')
    if ntu is not None and ntu > THRESHOLDS['ntu']['max']:
        issues.append(f"Turbidity {ntu:.1f} NTU exceeds limit ({THRESHOLDS['ntu']['max']} NTU)")

    tds = point.get('tds')
    if tds is not None and tds > THRESHOLDS['tds']['max']:
        issues.append(f"TDS {tds:.0f} ppm exceeds limit ({THRESHOLDS['tds']['max']} ppm)")

    return issues


def overall_status(statuses: Dict[str, str]) -> str:
    if not statuses:
        return 'good'
    return max(statuses.values(), key=STATUS_ORDER.index)


def assess_reading(point: Optional[Dict[str, Any]]) -> Dict[str, Any]:
    """
    Status of each thresholded parameter, the worst of them, and the issues.

    A missing reading is reported as 'offline'.
    """
    if not point:
        return {'status': {}, 'overall': 'offline', 'issues': [], 'hasIssues': False}

    statuses = {
        param: classify_parameter(param, point[param])
        for param in THRESHOLDS
        if point.get(param) is not None
    }
    issues = detect_issues(point)
    return {
        'status': statuses,
        'overall': overall_status(statuses),
        'issues': issues,
        'hasIssues': len(issues) > 0,
    }
