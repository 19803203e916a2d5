from splitledger import create_app
app = create_app()
if __name__ == "__main__":
    print("\n" + "="*50)
    print("STARTING LEDGER API ON ALL INTERFACES (0.0.0.0)")
    print("Balances live in memory and reset on restart.")
    print("="*50 + "\n")
    app.run(host='0.0.0.0', port=5000, debug=True)
