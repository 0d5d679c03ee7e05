import httpx
import json
import sys

API_BASE = "http://localhost:8000/api/v1"
SAMPLE_FILE = "samples/fortified_rice_audit.json"

def run_scoring(path: str = SAMPLE_FILE):
    with open(path, "r") as f:
        audit = json.load(f)

    payload = {
        "sections": audit["template"]["sections"],
        "responses": audit["responses"],
    }

    print(f"Scoring {audit['template']['name']} ({len(payload['responses'])} responses)...")
    try:
        resp = httpx.post(f"{API_BASE}/scoring/calculate", json=payload, timeout=30.0)
        resp.raise_for_status()
        result = resp.json()["scoring_result"]
        print(f"Score: {result['overall_percentage']:.1f}% -> {result['category']}")
        for section in result["section_scores"]:
            mark = "PASS" if section["passed"] else "FAIL"
            print(f"  [{mark}] {section['section_name']}: {section['percentage']:.1f}%")
        for flag in result["red_flags"]:
            print(f"  P{flag['priority']} {flag['item_id']}: {flag['issue']}")

        if audit.get("hypotheticalChanges"):
            print("Running what-if analysis...")
            resp = httpx.post(
                f"{API_BASE}/scoring/what-if",
                json={**payload, "hypothetical_changes": audit["hypotheticalChanges"]},
                timeout=30.0
            )
            resp.raise_for_status()
            analysis = resp.json()["analysis"]
            print(f"Projected: {analysis['projected_score']['overall_percentage']:.1f}% "
                  f"({analysis['improvement']:+.1f} pts) fixing {', '.join(analysis['items_to_fix'])}")

    except Exception as e:
        print(f"Error: {e}")

if __name__ == "__main__":
    run_scoring(*sys.argv[1:2])
