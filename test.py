import requests  # Libreria HTTP sincrona per testare il server avviato
import random  # Per scegliere percorsi casuali nello stress test
import threading  # Per eseguire richieste concorrenti su più thread

BASE_URL = "http://127.0.0.1:3000"  # Base URL del web server (web_server.py su porta 3000)

# ---------------------------
# Test singoli percorsi
# ---------------------------
def test_get_top():
    print(">>> GET pagina top")
    r = requests.get(f"{BASE_URL}/")  # Home renderizzata da views/top.html
    print(r.status_code, r.headers.get("Content-Type"))

def test_get_top_query():
    print(">>> GET pagina top con query e header extra")
    r = requests.get(f"{BASE_URL}/", params={"ref": "smoke"}, headers={"X-Smoke": "1"})  # Stessa risposta attesa
    print(r.status_code, len(r.text))

def test_get_static():
    print(">>> GET file statico css/style.css")
    r = requests.get(f"{BASE_URL}/css/style.css")  # Servito da public/
    print(r.status_code, r.headers.get("Content-Type"))

def test_get_notfound():
    print(">>> GET percorso inesistente")
    r = requests.get(f"{BASE_URL}/nonexistent-path")  # Caso 404 atteso
    print(r.status_code, r.text)

def test_post_top_notfound():
    print(">>> POST / (metodo senza rotta)")
    r = requests.post(f"{BASE_URL}/")  # Anche un metodo non gestito => 404
    print(r.status_code, r.text)

# ---------------------------
# Stress test multi-thread
# ---------------------------
def stress_worker(n):
    """Worker che fa N richieste casuali"""
    for _ in range(n):
        url = random.choice([
            f"{BASE_URL}/",  # Pagina top
            f"{BASE_URL}/css/style.css",  # File statico
            f"{BASE_URL}/robots.txt",  # File statico
            f"{BASE_URL}/nonexistent-path",  # 404
        ])
        try:
            r = requests.get(url, timeout=2)  # Timeout breve per non bloccare
            print(f"[{threading.current_thread().name}] {url} -> {r.status_code}")
        except requests.RequestException as e:
            print(f"[{threading.current_thread().name}] Errore: {e}")  # Logga eventuali errori di rete

def run_stress(num_threads=5, req_per_thread=10):
    print(f">>> Stress test con {num_threads} thread x {req_per_thread} richieste")
    threads = []
    for i in range(num_threads):
        t = threading.Thread(target=stress_worker, args=(req_per_thread,), name=f"T{i}")  # Crea thread worker
        threads.append(t)
        t.start()  # Avvia thread
    for t in threads:
        t.join()  # Attende il completamento di tutti i thread

# ---------------------------
# Main
# ---------------------------
if __name__ == "__main__":
    # Esegue i test singoli
    test_get_top()
    test_get_top_query()
    test_get_static()
    test_get_notfound()
    test_post_top_notfound()

    # Stress test (il server e' single-thread: le richieste vengono servite in coda)
    run_stress(num_threads=10, req_per_thread=20)
