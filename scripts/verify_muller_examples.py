import sys
from pathlib import Path

# 프로젝트 루트 경로 추가 (mullerroot 모듈을 찾기 위함)
root_path = Path(__file__).parent.parent
sys.path.append(str(root_path))

from mullerroot.services.report import format_summary
from mullerroot.services.solver import solve
from mullerroot.services.target import TARGET_LABEL, target_function

# (x0, x1, iterations, tolerance digits, expected root)
CASES = [
    (1.0, 2.0, 20, 15, 1.122462048309),
    (-1.0, -2.0, 20, 15, -1.122462048309),
]


def run_verification() -> bool:
    print("=" * 60)
    print(f"🚀 Muller Solver Verification ({TARGET_LABEL})")
    print("=" * 60)

    ok = True
    for x0, x1, n, digits, expected in CASES:
        result = solve(x0, x1, n, digits, target_function)
        err = abs(result.root - expected)
        passed = result.converged and err < 1e-12
        ok = ok and passed

        print(f"\n[x0={x0:+g}, x1={x1:+g}, n={n}, t={digits}]")
        print(format_summary(result))
        print(f"  iterations used : {result.iterations_used}")
        print(f"  |root - target| : {err:.3e}  {'✅ PASS' if passed else '❌ FAIL'}")

    return ok


if __name__ == "__main__":
    sys.exit(0 if run_verification() else 1)
