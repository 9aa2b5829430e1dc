""" Interactive zero-knowledge proof of a Sudoku solution.

Each round:
1. The prover relabels the digits of their solution with a random mapping.
2. The prover commits to every cell of the relabelled grid, and to the mapping.
3. The verifier asks to open one row, one column, one 3x3 box, or the mapping.
4. The verifier checks the opening against the commitments and the Sudoku rules.

A prover without a solution can answer at most 27 of the 28 challenges,
so repeating the round makes cheating hopeless. The verifier learns
nothing, since the mapping is fresh every round.
"""

#%% Settings
challengeMax = 9 * 3 + 1    # Possible choices: 9 per "type", plus 1 for the mapping
nRounds = 5000              # Security factor of the interactive protocol

import argparse
import logging
import math
import sys
import threading
from collections import Counter, namedtuple
from concurrent.futures import ThreadPoolExecutor

from cheatingProvers import FakeGridProver, TamperingProver, swappedCellsGrid
from sudokuChallenges import buildCatalogue, describeRequest, nextChallenge
from sudokuGrids import formatGrid, puzzle, solution
from sudokuProver import Prover
from sudokuVerifier import verify

log = logging.getLogger(__name__)


ProtocolReport = namedtuple("ProtocolReport", [
    "accepted",         # The single outcome of the proof
    "rounds",           # Rounds requested
    "roundsRun",        # Rounds actually played before stopping
    "failedRound",      # First rejected round, or None
    "failedRequest",    # Label of the challenge that exposed the prover, or None
    "challengeCounts",  # Challenges played, by kind
    "falseAcceptBound", # Chance that a cheating prover passes every round
])


#%% Soundness

def falseAcceptBound(nRounds, catalogueSize=challengeMax):
    " Chance of a prover without a solution passing every round. "
    return ((catalogueSize - 1) / catalogueSize) ** nRounds

def roundsForSecurity(bits, catalogueSize=challengeMax):
    " Fewest rounds to push the false-accept chance below 2^-bits. "
    return math.ceil(bits / math.log2(catalogueSize / (catalogueSize - 1)))


#%% Rounds

def runRound(prover, catalogue):
    proverRound = prover.startRound()
    # The challenge is picked only once the commitments are fixed.
    request = nextChallenge(catalogue)
    response = proverRound.reveal(request)
    return verify(request, response, proverRound.publicCommitment), request


def _runRounds(prover, catalogue, roundNumbers, failed):
    " Play rounds until done, or until any worker saw a rejection. "
    counts = Counter()
    played = 0
    for roundNumber in roundNumbers:
        if failed.is_set():
            break
        ok, request = runRound(prover, catalogue)
        played += 1
        counts[request.kind] += 1
        log.debug("Round %i: %s %s", roundNumber, describeRequest(request), "ok" if ok else "REJECTED")
        if not ok:
            failed.set()
            log.warning("Round %i rejected on %s", roundNumber, describeRequest(request))
            return played, counts, (roundNumber, request)
    return played, counts, None


def runProtocol(prover, catalogue=None, nRounds=nRounds, nWorkers=1):
    """
    Run up to `nRounds` rounds and stop at the first rejection.

    With nWorkers > 1, rounds are spread over threads. Every round still
    owns its own permutation and commitments, and a rejection in any
    thread stops all of them.
    """
    if nRounds < 1:
        raise ValueError("At least one round is needed, got %r" % nRounds)
    if nWorkers < 1:
        raise ValueError("At least one worker is needed, got %r" % nWorkers)
    if catalogue is None:
        catalogue = buildCatalogue()

    log.info("Running %i rounds over %i challenges with %i worker(s)", nRounds, len(catalogue), nWorkers)
    failed = threading.Event()

    if nWorkers == 1:
        results = [_runRounds(prover, catalogue, range(1, nRounds + 1), failed)]
    else:
        with ThreadPoolExecutor(max_workers=nWorkers) as executor:
            futures = [
                executor.submit(_runRounds, prover, catalogue, range(1 + w, nRounds + 1, nWorkers), failed)
                for w in range(nWorkers)]
            results = [f.result() for f in futures]

    roundsRun = sum(played for played, _, _ in results)
    counts = Counter()
    for _, workerCounts, _ in results:
        counts.update(workerCounts)
    failures = sorted((f for _, _, f in results if f is not None), key=lambda f: f[0])

    failedRound = failedRequest = None
    if failures:
        failedRound, request = failures[0]
        failedRequest = describeRequest(request)

    return ProtocolReport(
        accepted=not failures,
        rounds=nRounds,
        roundsRun=roundsRun,
        failedRound=failedRound,
        failedRequest=failedRequest,
        challengeCounts=dict(counts),
        falseAcceptBound=falseAcceptBound(nRounds, len(catalogue)),
    )


def Protocol(solution=solution, nRounds=nRounds):
    " True when an honest prover with `solution` convinces the verifier. "
    return runProtocol(Prover(solution), nRounds=nRounds).accepted


#%% Report

def formatReport(report):
    lines = []
    if report.accepted:
        lines.append("Proof accepted after %i rounds." % report.roundsRun)
    else:
        lines.append("Proof REJECTED at round %i (%s), after %i of %i rounds." % (
            report.failedRound, report.failedRequest, report.roundsRun, report.rounds))
    lines.append("Challenges played: " + ", ".join(
        "%s=%i" % (kind, report.challengeCounts.get(kind, 0)) for kind in ("row", "column", "box", "mapping")))
    bound = report.falseAcceptBound
    bits = -math.log2(bound) if bound > 0 else float("inf")
    lines.append("False-accept bound: %.3g (2^-%.1f)" % (bound, bits))
    return "\n".join(lines)


def buildArgParser():
    p = argparse.ArgumentParser(
        description="Prove knowledge of a Sudoku solution without revealing it.")
    p.add_argument("--rounds", "-n", type=int, default=nRounds,
                   help="Number of rounds (default: %i)." % nRounds)
    p.add_argument("--workers", "-w", type=int, default=1,
                   help="Threads to spread the rounds over (default: 1).")
    p.add_argument("--cheat", choices=["tamper", "fake"], default=None,
                   help="Play a dishonest prover instead of the honest one.")
    p.add_argument("--verbose", "-v", action="store_true",
                   help="Log every round.")
    return p


def main(argv=None):
    args = buildArgParser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S")

    if args.cheat == "tamper":
        prover = TamperingProver(solution)
    elif args.cheat == "fake":
        prover = FakeGridProver(swappedCellsGrid(solution))
    else:
        prover = Prover(solution)

    print("Puzzle:\n")
    print(formatGrid(puzzle))
    print()

    report = runProtocol(prover, nRounds=args.rounds, nWorkers=args.workers)
    print(formatReport(report))
    return 0 if report.accepted else 1


if __name__ == "__main__":
    sys.exit(main())
