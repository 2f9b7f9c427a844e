"""
Week templates for the three phases of the program.

Each phase is 8 weeks, each week 5 sessions (day offsets 0-4 from the week's
start date). Entries carry the session type and optional minutes, km, focus
and instructions.
"""

from .models import LIGHT, INTERVAL, STRENGTH, MODERATE, LONG_RUN

WEEKS_PER_PHASE = 8
SESSIONS_PER_WEEK = 5


def _s(session_type, minutes=None, focus=None, instructions=None, km=None):
    item = {'type': session_type, 'minutes': minutes}
    if km is not None:
        item['km'] = km
    if focus is not None:
        item['focus'] = focus
    if instructions is not None:
        item['instructions'] = instructions
    return item


# Phase 1: Foundation (weeks 1-8)
TEMPLATE_WEEKS_PHASE1 = [
    [
        _s(LIGHT, 30, "Posture + core afterwards", "Easy zone 1-2. 3x20 s technique strides. Core 6-8 min."),
        _s(INTERVAL, 30, "6×2 min, short rest", "Warm up 10. 6x2 min zone 3-4, 60 s jog. Cool down 5-10."),
        _s(STRENGTH, 25, "Legs/core", "2 rounds: Bulgarian split squat, hip thrust, calf raise, Pallof press, side plank."),
        _s(MODERATE, 40, "Steady rhythm", "Zone 2-3, 4x20 s strides."),
        _s(LONG_RUN, 50, "Easy, last 5 min faster", "Easy zone 1-2. 5 min zone 3 at the end."),
    ],
    [
        _s(LIGHT, 30, "Posture + core", "Easy zone 1-2. 3x30 s high knees. Core 6-8 min."),
        _s(INTERVAL, 32, "6×2 min, shorter rest", "Warm up 10. 6x2 min zone 3-4, 45 s jog. Cool down."),
        _s(STRENGTH, 25, "Stability", "2 rounds: step-up, single-leg deadlift (light), calf raise, hollow hold."),
        _s(MODERATE, 40),
        _s(LONG_RUN, 55),
    ],
    [
        _s(LIGHT, 35, "Posture + core", "Easy. 4x20 s cadence 180+. Core 8-10 min."),
        _s(INTERVAL, 35, "5×3 min", "Warm up 10. 5x3 min zone 3-4, 90 s jog. Cool down 8."),
        _s(STRENGTH, 30),
        _s(MODERATE, 45, "Last 10 min faster", "35 min zone 2 + 10 min zone 3."),
        _s(LONG_RUN, 60),
    ],
    [
        _s(LIGHT, 35),
        _s(INTERVAL, 36, "5×3 min", "Same as week 3, stay in control."),
        _s(STRENGTH, 30),
        _s(MODERATE, 45),
        _s(LONG_RUN, 70),
    ],
    [
        _s(LIGHT, 40, "Posture + core", "Easy. 6x15 s strides. Light core."),
        _s(INTERVAL, 40, "4×5 min", "Warm up 12. 4x5 zone 3, 2 min jog."),
        _s(STRENGTH, 30, "Legs + calves", "3 rounds: squat, hip thrust, calf raise, farmer carry."),
        _s(MODERATE, 50),
        _s(LONG_RUN, 75),
    ],
    [
        _s(LIGHT, 40),
        _s(INTERVAL, 42, "4×5 min, shorter rest", "Warm up 12. 4x5 zone 3, 90 s jog."),
        _s(STRENGTH, 30),
        _s(MODERATE, 50),
        _s(LONG_RUN, 80),
    ],
    [
        _s(LIGHT, 40),
        _s(INTERVAL, 44, "3×8 min (2 min rest)", "Warm up 12. 3x8 zone 3, 2 min jog. Cool down 10."),
        _s(STRENGTH, 30),
        _s(MODERATE, 50, "Some pace in the middle", "15 min zone 2 + 15 min zone 3 + 20 min easy."),
        _s(LONG_RUN, 85),
    ],
    [
        _s(LIGHT, 40),
        _s(INTERVAL, 40, "20 min steady tempo", "Warm up 15. 20 min upper zone 3. Cool down 5-10."),
        _s(STRENGTH, 30),
        _s(MODERATE, 55),
        _s(LONG_RUN, 90),
    ],
]

# Phase 2: Development (weeks 9-16)
TEMPLATE_WEEKS_PHASE2 = [
    [
        _s(LIGHT, 35, "Posture + core", "Easy zone 1-2. 3x20 s technique. Core 8-10 min."),
        _s(INTERVAL, 40, "10×1 min hill", "Warm up 12. 10x1 min on a 4-6% incline, jog down. Cool down 8."),
        _s(STRENGTH, 25, "Hips/calves", "3 rounds: single-leg deadlift, reverse lunge, calf raise, plank."),
        _s(MODERATE, 50, "Threshold play", "2x10 min zone 3 (2 min jog) at an even pace."),
        _s(LONG_RUN, 90, "Easy + last 5 min faster"),
    ],
    [
        _s(LIGHT, 35),
        _s(INTERVAL, 42, "6×3 min hill", "Warm up 12. 6x3 min zone 3-4, jog down. Cool down."),
        _s(STRENGTH, 25),
        _s(MODERATE, 50),
        _s(LONG_RUN, 95),
    ],
    [
        _s(LIGHT, 40, "Technique + cadence", "4x20 s cadence build to 180+. Light core."),
        _s(INTERVAL, 45, "5×4 min hill", "Warm up 12. 5x4 min z3-4, 2 min jog. Cool down."),
        _s(STRENGTH, 30),
        _s(MODERATE, 55, "Progressive", "Z2 to Z3, last 15 min faster."),
        _s(LONG_RUN, 100),
    ],
    [
        _s(LIGHT, 40),
        _s(INTERVAL, 45, "4×5 min tempo on the flat", "Warm up 12. 4x5 min z3, 90 s jog."),
        _s(STRENGTH, 30),
        _s(MODERATE, 55),
        _s(LONG_RUN, 105),
    ],
    [
        _s(LIGHT, 40),
        _s(INTERVAL, 45, "3×8 min tempo", "Warm up 12. 3x8 min z3, 2 min jog. Cool down 8."),
        _s(STRENGTH, 30, "Stability", "3 rounds: step-ups, hip raise, calf raise, side plank."),
        _s(MODERATE, 55, "Last 10 faster"),
        _s(LONG_RUN, 110),
    ],
    [
        _s(LIGHT, 40),
        _s(INTERVAL, 40, "20 min steady threshold", "Warm up 15. 20 min upper z3. Cool down 5-10."),
        _s(STRENGTH, 25),
        _s(MODERATE, 55),
        _s(LONG_RUN, 110, "Easy trail"),
    ],
    [
        _s(LIGHT, 45),
        _s(INTERVAL, 42, "6×3 min hill", "Same as week 2, slightly faster."),
        _s(STRENGTH, 25),
        _s(MODERATE, 55),
        _s(LONG_RUN, 115),
    ],
    [
        _s(LIGHT, 45),
        _s(INTERVAL, 45, "4×5 min tempo", "Stay in control, even power."),
        _s(STRENGTH, 25),
        _s(MODERATE, 55),
        _s(LONG_RUN, 120, "Last 10 min faster"),
    ],
]

# Phase 3: Sharpening (weeks 17-24)
TEMPLATE_WEEKS_PHASE3 = [
    [
        _s(LIGHT, 35, "Recovery + mobility"),
        _s(INTERVAL, 45, "4×5 min hill", "Warm up 12. 4x5 min z3-4, jog down."),
        _s(STRENGTH, 20, "Light explosive", "2-3 rounds: step-ups, calf raise, hip raise."),
        _s(MODERATE, 50, "Z3 steady, last 10 faster"),
        _s(LONG_RUN, 100, "Terrain/elevation"),
    ],
    [
        _s(LIGHT, 35),
        _s(INTERVAL, 48, "3×8 min tempo on trail", "Warm up 12. 3x8 min z3-4."),
        _s(STRENGTH, 20),
        _s(MODERATE, 55),
        _s(LONG_RUN, 105),
    ],
    [
        _s(LIGHT, 35),
        _s(INTERVAL, 50, "3×10 min tempo", "2 min jog between."),
        _s(STRENGTH, 20),
        _s(MODERATE, 55),
        _s(LONG_RUN, 110),
    ],
    [
        _s(LIGHT, 35),
        _s(INTERVAL, 45, "8×3 min", "1 min jog between. Keep a controlled high pace."),
        _s(STRENGTH, 20),
        _s(MODERATE, 55),
        _s(LONG_RUN, 115),
    ],
    [
        _s(LIGHT, 35),
        _s(INTERVAL, 45, "2×15 min race pace", "Target pace from the course profile. 3 min jog between."),
        _s(STRENGTH, 20),
        _s(MODERATE, 50),
        _s(LONG_RUN, 115, "Test gear/nutrition"),
    ],
    [
        _s(LIGHT, 30),
        _s(INTERVAL, 40, "20 min steady threshold"),
        _s(STRENGTH, 20),
        _s(MODERATE, 50),
        _s(LONG_RUN, 100),
    ],
    [
        _s(LIGHT, 30),
        _s(INTERVAL, 35, "6×2 min light and quick"),
        _s(STRENGTH, 15, "Mobility + activation"),
        _s(MODERATE, 45),
        _s(LONG_RUN, 60),
    ],
    [
        _s(LIGHT, 25),
        _s(INTERVAL, 30, "4×3 min light"),
        _s(STRENGTH, 15),
        _s(MODERATE, 40),
        _s(LONG_RUN, 45),
    ],
]

PHASES = [
    ("Phase 1 - Foundation", TEMPLATE_WEEKS_PHASE1),
    ("Phase 2 - Development", TEMPLATE_WEEKS_PHASE2),
    ("Phase 3 - Sharpening", TEMPLATE_WEEKS_PHASE3),
]


def validate_catalog(phases=PHASES):
    """Raise ValueError unless every phase is WEEKS_PER_PHASE x SESSIONS_PER_WEEK."""
    for name, weeks in phases:
        if len(weeks) != WEEKS_PER_PHASE:
            raise ValueError(f"{name}: expected {WEEKS_PER_PHASE} weeks, got {len(weeks)}")
        for i, week in enumerate(weeks, 1):
            if len(week) != SESSIONS_PER_WEEK:
                raise ValueError(f"{name} week {i}: expected {SESSIONS_PER_WEEK} sessions, got {len(week)}")
    return True
