from __future__ import annotations

# Checked in order against the lowercased question; more specific phrases come first.
CONCEPT_KEYWORDS = {
    # Biology
    "photosynthesis": "Photosynthesis",
    "cellular respiration": "Cellular Respiration",
    "respiration": "Respiration",
    "dna": "DNA Structure",
    "genetics": "Genetics",
    "evolution": "Evolution",
    "mitosis": "Cell Division (Mitosis)",
    "meiosis": "Cell Division (Meiosis)",
    "ecology": "Ecology",
    "cells": "Cell Biology",
    # Physics
    "gravity": "Gravity and Forces",
    "magnetism": "Magnetism",
    "electricity": "Electricity",
    "current": "Electric Current",
    "waves": "Wave Motion",
    "sound": "Sound Waves",
    "light": "Light and Optics",
    "optics": "Optics",
    "thermodynamics": "Thermodynamics",
    "energy": "Energy and Work",
    "motion": "Motion and Forces",
    # Chemistry
    "atoms": "Atomic Structure",
    "molecules": "Molecular Structure",
    "bonding": "Chemical Bonding",
    "reactions": "Chemical Reactions",
    "acids": "Acids and Bases",
    "bases": "Acids and Bases",
    "periodic": "Periodic Table",
    "elements": "Chemical Elements",
    # Mathematics
    "algebra": "Algebra",
    "geometry": "Geometry",
    "coordinate": "Coordinate Geometry",
    "calculus": "Calculus",
    "trigonometry": "Trigonometry",
    "statistics": "Statistics",
    "probability": "Probability",
    "functions": "Mathematical Functions",
    "equations": "Solving Equations",
    # Computer Science
    "algorithms": "Algorithms",
    "data structures": "Data Structures",
    "programming": "Programming Concepts",
    "binary": "Binary Systems",
    "search": "Search Algorithms",
    "sorting": "Sorting Algorithms",
    "recursion": "Recursion",
    "loops": "Programming Loops",
}

SUBJECT_KEYWORDS = {
    "Biology": ["photosynthesis", "dna", "cell", "evolution", "genetics", "respiration", "ecology"],
    "Physics": ["gravity", "force", "energy", "wave", "light", "electricity", "magnetism", "motion"],
    "Chemistry": ["atom", "molecule", "reaction", "acid", "base", "element", "bond", "periodic"],
    "Mathematics": ["algebra", "geometry", "calculus", "trigonometry", "equation", "function", "coordinate"],
    "Computer Science": ["algorithm", "programming", "data", "binary", "search", "sort", "recursion", "loop"],
}

DIFFICULTY_HINTS = {
    "beginner": ["basic", "simple", "explain", "what is"],
    "advanced": ["advanced", "complex", "derive", "prove"],
    "intermediate": ["how does", "analyze", "compare"],
}

SUBJECT_COLORS = {
    "Biology": "#2d5016",
    "Physics": "#1a1a2e",
    "Chemistry": "#4a1a4a",
    "Mathematics": "#2c3e50",
    "Computer Science": "#1a1a1a",
}

GREEN_SCREEN_COLOR = "#00FF00"
DEFAULT_BACKGROUND_COLOR = "#2c3e50"

BACKGROUND_PROMPTS = {
    "Biology": "detailed scientific diagram of {concept}, labeled parts, clean educational illustration, high contrast, biology textbook style",
    "Physics": "physics diagram showing {concept}, mathematical formulas, vectors, clean scientific illustration, educational poster style",
    "Chemistry": "chemistry diagram of {concept}, molecular structures, chemical equations, laboratory style, educational illustration",
    "Mathematics": "mathematical visualization of {concept}, geometric shapes, coordinate grids, clean diagram, educational math textbook style",
    "Computer Science": "technical diagram illustrating {concept}, flowcharts, data structures, clean modern design, programming concept visualization",
    "General": "educational illustration of {concept}, clean diagram, informative design, suitable for learning",
}
