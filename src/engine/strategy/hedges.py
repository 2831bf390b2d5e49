"""Closed-form payoff profiles for hedge and income strategies.

All amounts are for the full position: per-share values are scaled by the
standard contract size (100 shares) and the number of contracts. Inputs are
not validated; degenerate strikes or premiums simply follow the formulas.
"""

from src.engine.models.enums import HedgeStrategy
from src.engine.models.result import HedgePayoff

CONTRACT_MULTIPLIER = 100


def long_put_payoff(strike: float, premium: float, contracts: int = 1) -> HedgePayoff:
    """Calculate the payoff profile of a long put.

    Profit/Loss Profile:
    - Max Loss: Premium paid
    - Max Profit: (Strike - Premium) x 100 x contracts (underlying goes to 0)
    - Breakeven: Strike - Premium

    Example:
        >>> payoff = long_put_payoff(100, 5, 2)
        >>> payoff.max_loss, payoff.max_profit, payoff.breakeven
        (1000, 19000, 95)
    """
    per_contract_cost = premium * CONTRACT_MULTIPLIER
    return HedgePayoff(
        strategy=HedgeStrategy.LONG_PUT,
        max_loss=per_contract_cost * contracts,
        max_profit=(strike * CONTRACT_MULTIPLIER - per_contract_cost) * contracts,
        breakeven=strike - premium,
    )


def bear_put_spread_payoff(
    long_strike: float,
    short_strike: float,
    net_premium: float,
    contracts: int = 1,
) -> HedgePayoff:
    """Calculate the payoff profile of a bear put spread.

    Long put at the higher strike + short put at the lower strike.

    Profit/Loss Profile:
    - Max Loss: Net premium paid
    - Max Profit: (Long Strike - Short Strike - Net Premium) x 100 x contracts
    - Breakeven: Long Strike - Net Premium
    """
    return HedgePayoff(
        strategy=HedgeStrategy.BEAR_PUT_SPREAD,
        max_loss=net_premium * CONTRACT_MULTIPLIER * contracts,
        max_profit=(long_strike - short_strike - net_premium) * CONTRACT_MULTIPLIER * contracts,
        breakeven=long_strike - net_premium,
    )


def cash_secured_put_payoff(strike: float, premium: float, contracts: int = 1) -> HedgePayoff:
    """Calculate the payoff profile of a cash-secured put.

    Short put with cash set aside to buy the shares at the strike.

    Profit/Loss Profile:
    - Max Profit: Premium received
    - Max Loss: Strike x 100 x contracts - premium received (assigned at 0)
    - Breakeven: Strike - Premium
    """
    max_profit = premium * CONTRACT_MULTIPLIER * contracts
    return HedgePayoff(
        strategy=HedgeStrategy.CASH_SECURED_PUT,
        max_loss=strike * CONTRACT_MULTIPLIER * contracts - max_profit,
        max_profit=max_profit,
        breakeven=strike - premium,
    )


def covered_call_payoff(
    strike: float,
    premium: float,
    cost_basis: float,
    contracts: int = 1,
) -> HedgePayoff:
    """Calculate the payoff profile of a covered call.

    Long 100 shares per contract + short call.

    Profit/Loss Profile:
    - Max Profit: (Strike - Cost Basis) x 100 x contracts + premium received
      (shares called away)
    - Max Loss: Shares cost - premium received (underlying goes to 0)
    - Breakeven: Cost Basis - Premium

    Args:
        strike: Call strike price.
        premium: Premium received per share.
        cost_basis: Cost per share of the underlying.
        contracts: Number of contracts.
    """
    premium_received = premium * CONTRACT_MULTIPLIER * contracts
    shares_cost = cost_basis * CONTRACT_MULTIPLIER * contracts
    return HedgePayoff(
        strategy=HedgeStrategy.COVERED_CALL,
        max_loss=shares_cost - premium_received,
        max_profit=(strike * CONTRACT_MULTIPLIER * contracts - shares_cost) + premium_received,
        breakeven=cost_basis - premium,
    )
