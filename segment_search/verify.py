"""
SAT cross-check for deduced digit mappings.

Encodes "which wire drives which segment" for one display as CNF and solves
it with python-sat, independently of the structural deduction. Used to
confirm that a deduced mapping is the one and only wiring consistent with
the training patterns.
"""

from typing import Iterable, Optional

from pysat.formula import CNF
from pysat.solvers import Solver

from .deduction import DigitMapping
from .errors import MalformedTrainingSetError
from .glyphs import DIGIT_GLYPHS, SEGMENT_NAMES, segment_bit, segments_from_mask


def _build_cnf(masks: list[int]) -> tuple[CNF, dict, dict]:
    """
    Build the wiring CNF for a list of training masks.

    Variables:
        p[w][s]: wire w drives segment s
        d[i][k]: training mask i shows digit k
    """
    cnf = CNF()
    var_counter = [1]

    def new_var():
        v = var_counter[0]
        var_counter[0] += 1
        return v

    def exactly_one(lits):
        cnf.append(list(lits))  # At least one
        for idx1, lit1 in enumerate(lits):
            for lit2 in lits[idx1 + 1:]:
                cnf.append([-lit1, -lit2])  # At most one

    p = {w: {s: new_var() for s in SEGMENT_NAMES} for w in SEGMENT_NAMES}
    d = {i: {k: new_var() for k in range(10)} for i in range(len(masks))}

    # Wiring is a permutation
    for w in SEGMENT_NAMES:
        exactly_one([p[w][s] for s in SEGMENT_NAMES])
    for s in SEGMENT_NAMES:
        exactly_one([p[w][s] for w in SEGMENT_NAMES])

    # Patterns and digits pair up one-to-one
    for i in range(len(masks)):
        exactly_one([d[i][k] for k in range(10)])
    for k in range(10):
        exactly_one([d[i][k] for i in range(len(masks))])

    # If mask i shows digit k, a lit wire may only drive a segment of glyph k
    # and a dark wire only a segment outside it
    for i, mask in enumerate(masks):
        for k in range(10):
            glyph = DIGIT_GLYPHS[k]
            for w in SEGMENT_NAMES:
                wire_lit = bool(mask & segment_bit(w))
                for s in SEGMENT_NAMES:
                    if wire_lit != bool(glyph & segment_bit(s)):
                        cnf.append([-d[i][k], -p[w][s]])

    return cnf, p, d


def _decode_wiring(model: set[int], p: dict) -> dict[str, str]:
    wires = {}
    for w in SEGMENT_NAMES:
        for s in SEGMENT_NAMES:
            if p[w][s] in model:
                wires[w] = s
                break
    return wires


def solve_wiring(training: Iterable[int]) -> Optional[dict[str, str]]:
    """
    Find a wire -> segment permutation consistent with the training masks.

    Returns:
        Dict mapping wire letters to segment letters, or None if UNSAT
    """
    cnf, p, _ = _build_cnf(list(training))

    with Solver(bootstrap_with=cnf) as solver:
        if solver.solve():
            return _decode_wiring(set(solver.get_model()), p)
        return None


def count_wirings(training: Iterable[int], limit: int = 2) -> int:
    """Count consistent wirings, stopping once `limit` have been found."""
    cnf, p, _ = _build_cnf(list(training))
    found = 0

    with Solver(bootstrap_with=cnf) as solver:
        while found < limit and solver.solve():
            found += 1
            wires = _decode_wiring(set(solver.get_model()), p)
            solver.add_clause([-p[w][s] for w, s in wires.items()])

    return found


def verify_mapping(mapping: DigitMapping, training: Iterable[int]) -> tuple[bool, list[str]]:
    """
    Verify a deduced mapping against the SAT model of the same display.

    Args:
        mapping: Mapping produced by deduce()
        training: The training masks it was deduced from

    Returns:
        Tuple of (all_correct, list of error messages)
    """
    masks = list(training)
    errors = []

    if set(masks) != set(mapping.masks):
        errors.append("mapping does not cover the same masks as the training set")
        return False, errors

    cnf, p, d = _build_cnf(masks)

    with Solver(bootstrap_with=cnf) as solver:
        if not solver.solve():
            errors.append("no wiring is consistent with the training masks")
            return False, errors

        model = set(solver.get_model())
        wires = _decode_wiring(model, p)

        for i, mask in enumerate(masks):
            sat_digit = next(k for k in range(10) if d[i][k] in model)
            deduced = mapping.digit_for(mask)
            if sat_digit != deduced:
                errors.append(
                    f"Pattern {segments_from_mask(mask)}: "
                    f"deduced {deduced}, SAT model says {sat_digit}"
                )

        # A second model would mean the training masks are ambiguous
        solver.add_clause([-p[w][s] for w, s in wires.items()])
        if solver.solve():
            errors.append("training masks admit more than one wiring")

    try:
        deduced_wires = mapping.wire_map()
    except MalformedTrainingSetError as e:
        errors.append(f"Deduced mapping has no wiring: {e}")
        return False, errors

    for w in SEGMENT_NAMES:
        if deduced_wires[w] != wires[w]:
            errors.append(
                f"Wire {w}: deduced segment {deduced_wires[w]}, SAT model says {wires[w]}"
            )

    return len(errors) == 0, errors
