# Import the client and CLI lazily to avoid circular dependencies
def __getattr__(name):
    if name == "MoneyMoney":
        from moneymoney.client import MoneyMoney
        return MoneyMoney
    if name == "main":
        from moneymoney.cli.main import main
        return main
    raise AttributeError(f"module '{__name__}' has no attribute '{name}'")
