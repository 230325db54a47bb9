COMPONENTS = "components"
COMPATIBILITY = "compatibility"
TOTAL_WATTAGE = "totalWattage"
#
CPU_MAINBOARD = "cpuMainboard"
RAM_MAINBOARD = "ramMainboard"
PSU_WATTAGE = "psuWattage"
WARNINGS = "warnings"
#
ADEQUATE = "adequate"
MARGINAL = "marginal"
INSUFFICIENT = "insufficient"
#
DEFAULT_PSU_WATTAGE = 750
INSUFFICIENT_RATIO = 0.8
MARGINAL_RATIO = 0.6
