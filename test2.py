import asyncio  # Richieste concorrenti verso il server avviato
import sys  # Codice di uscita se il contratto non e' rispettato
from collections import Counter, defaultdict  # Conteggi per percorso/status

import aiohttp  # Client HTTP asincrono

BASE_URL = "http://127.0.0.1:3000"  # Web server (web_server.py) porta 3000

# Percorso -> (status atteso, frammento atteso nel body)
CONTRACT = {
    "/": (200, "<h1>Top Page</h1>"),
    "/css/style.css": (200, "font-family"),
    "/robots.txt": (200, "User-agent"),
    "/nonexistent-path": (404, "404 | The page does not exist!"),
}
ROUNDS = 50  # Quante volte ogni percorso viene richiesto
CONCURRENCY = 10  # Richieste in volo contemporaneamente


async def check(session, semaphore, path):
    """GET ``path``; return (path, status or client error name, matches contract)."""
    expected_status, marker = CONTRACT[path]
    async with semaphore:
        try:
            async with session.get(BASE_URL + path) as resp:
                body = await resp.text()
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            return path, type(e).__name__, False
    ok = resp.status == expected_status and marker in body
    return path, resp.status, ok


async def run_contract_check(rounds=ROUNDS, concurrency=CONCURRENCY):
    semaphore = asyncio.Semaphore(concurrency)
    timeout = aiohttp.ClientTimeout(total=5)
    async with aiohttp.ClientSession(timeout=timeout) as session:
        jobs = [check(session, semaphore, path) for _ in range(rounds) for path in CONTRACT]
        results = await asyncio.gather(*jobs)

    outcomes = defaultdict(Counter)
    mismatches = Counter()
    for path, outcome, ok in results:
        outcomes[path][outcome] += 1
        if not ok:
            mismatches[path] += 1

    print("\n--- Verifica contratto ---")
    for path, (expected_status, _) in CONTRACT.items():
        seen = ", ".join(f"{k}x{v}" for k, v in sorted(outcomes[path].items(), key=str))
        flag = "OK" if not mismatches[path] else f"KO ({mismatches[path]} difformi)"
        print(f"{path:<20} atteso {expected_status}  visto {seen}  {flag}")
    return sum(mismatches.values())


if __name__ == "__main__":
    failed = asyncio.run(run_contract_check())
    sys.exit(1 if failed else 0)
