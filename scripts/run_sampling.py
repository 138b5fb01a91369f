"""Build an enumerated distribution from a YAML config and sample from it.

The run directory under ``--results-dir`` receives ``log.txt``,
``metrics.jsonl``, ``config_resolved.yaml``, ``draws.json`` and
``metrics.json``.
"""
from __future__ import annotations

import argparse
import sys
import time
from pathlib import Path
from typing import Any, Dict

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from pmfkit.diagnostics import chi_square_test, frequency_table
from pmfkit.distributions import EnumeratedPmf
from pmfkit.rng import build_random_source
from pmfkit.utils.config import distribution_entries, load_config, to_plain_dict
from pmfkit.utils.logging import ExperimentLogger
from pmfkit.utils.serialization import save_dict, write_yaml


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument(
        "--config",
        type=str,
        default="configs/experiments/fair_coin.yaml",
        help="Path to the experiment YAML file",
    )
    parser.add_argument("--seed", type=int, default=None, help="Override the seed from the config")
    parser.add_argument(
        "--num-draws",
        type=int,
        default=None,
        help="Override the number of draws",
    )
    parser.add_argument(
        "--source",
        type=str,
        default=None,
        help="Uniform source: numpy, python or torch",
    )
    parser.add_argument(
        "--results-dir",
        type=str,
        default=None,
        help="Directory to store logs and artifacts",
    )
    return parser.parse_args()


def _get_attr(node, key: str, default):  # type: ignore[no-untyped-def]
    if node is None:
        return default
    if isinstance(node, dict):
        return node.get(key, default)
    return getattr(node, key, default)


def run(cfg: Any, args: argparse.Namespace) -> Dict[str, Any]:
    sampler_cfg = _get_attr(cfg, "sampler", {})
    seed = int(args.seed if args.seed is not None else _get_attr(cfg, "seed", 0))
    source_name = args.source or str(_get_attr(sampler_cfg, "source", "numpy"))
    search = str(_get_attr(sampler_cfg, "search", "binary"))
    num_draws = args.num_draws or int(_get_attr(sampler_cfg, "num_draws", 1000))
    results_dir = Path(args.results_dir or _get_attr(_get_attr(cfg, "logging", {}), "output_dir", "results"))

    experiment_name = cfg["experiment"]["name"]
    timestamp = time.strftime("%Y%m%d-%H%M%S")
    logger = ExperimentLogger(f"{timestamp}_{experiment_name}_seed{seed}", results_dir, stream=True)
    run_dir = logger.run_dir
    write_yaml(to_plain_dict(cfg), run_dir / "config_resolved.yaml")

    pmf = EnumeratedPmf(distribution_entries(cfg))
    logger.info(f"Built distribution with {len(pmf)} entries from {args.config}")

    rng = build_random_source(source_name, seed)
    sampler = pmf.create_sampler(rng, search=search)
    draws = sampler.draw_many(num_draws)
    logger.info(f"Drew {num_draws} values source={source_name} search={search} seed={seed}")

    table = frequency_table(draws, pmf)
    metrics: Dict[str, Any] = {
        "num_entries": len(pmf),
        "num_draws": num_draws,
        "seed": seed,
        "source": source_name,
        "frequencies": table.to_dict(orient="records"),
    }
    diagnostics_cfg = _get_attr(cfg, "diagnostics", {})
    if bool(_get_attr(diagnostics_cfg, "chi_square", True)) and (table["expected"] > 0).sum() > 1:
        fit = chi_square_test(draws, pmf)
        significance = float(_get_attr(diagnostics_cfg, "significance", 0.001))
        fit["rejected"] = fit["p_value"] < significance
        metrics["chi_square"] = fit
        if fit["rejected"]:
            logger.warning(f"Chi-square test rejected the fit p_value={fit['p_value']:.3g}")
        else:
            logger.info(f"Chi-square chi2={fit['chi2']:.4f} dof={fit['dof']:.0f} p_value={fit['p_value']:.4f}")
    logger.log({"num_draws": num_draws, "seed": seed, "source": source_name})

    save_dict({"draws": draws}, run_dir / "draws.json")
    save_dict(metrics, run_dir / "metrics.json")
    logger.info(f"Artifacts written to {run_dir}")
    logger.close()
    return metrics


def main() -> None:
    args = parse_args()
    cfg = load_config(args.config)
    run(cfg, args)


if __name__ == "__main__":
    main()
