"""Lightweight REST client for the team selector API."""

from __future__ import annotations

import argparse
import json
from pathlib import Path

import httpx

from fmteam.ingest import load_player_table


def main() -> None:
    parser = argparse.ArgumentParser(description="Interact with the team selector REST API")
    parser.add_argument("base_url", help="Base URL of the API, e.g. http://localhost:8000")
    parser.add_argument("role_file", type=Path, nargs="?", help="Role file")
    parser.add_argument("players", type=Path, nargs="?", help="Player table CSV")
    parser.add_argument("--list-roles", action="store_true", help="Print the role catalogue and exit")
    parser.add_argument("--list-categories", action="store_true", help="Print category membership and exit")
    parser.add_argument("--json", action="store_true", help="Print the full JSON response")
    args = parser.parse_args()

    if args.list_roles or args.list_categories:
        with httpx.Client(base_url=args.base_url) as client:
            if args.list_roles:
                resp = client.get("/roles")
                resp.raise_for_status()
                print("\n".join(resp.json()["roles"]))
            if args.list_categories:
                resp = client.get("/categories")
                resp.raise_for_status()
                for entry in resp.json():
                    print(f"{entry['category']}: {', '.join(entry['roles'])}")
        return

    if args.role_file is None or args.players is None:
        raise SystemExit("role file and players CSV are required unless using --list-roles/--list-categories")

    payload = {
        "role_file": args.role_file.read_text(encoding="utf-8"),
        "rows": load_player_table(args.players),
    }

    with httpx.Client(base_url=args.base_url) as client:
        resp = client.post("/select", json=payload)
        if resp.status_code == 400:
            raise SystemExit(resp.json().get("detail", "request rejected"))
        resp.raise_for_status()
        team = resp.json()

    if args.json:
        print(json.dumps(team, indent=2))
        return
    print(team["text"], end="")
    if team["unfilled_roles"]:
        print(f"Unfilled roles: {', '.join(team['unfilled_roles'])}")


if __name__ == "__main__":
    main()
