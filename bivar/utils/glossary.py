# Centralized glossary/help text used by the walkthrough output.

GLOSSARY = {
    "r": "Pearson correlation: normalized measure in [-1, 1] of linear association between X and Y.",
    "SS": "Sum of squares = Σ(xᵢ − mean)². Dispersion of one variable around its mean.",
    "SP": "Sum of products = Σ(xᵢ − mean X)(yᵢ − mean Y). Co-variation of X and Y.",
    "Regression": "Simple linear regression: the line Y' = bX + a minimizing squared prediction error.",
    "b": "Slope = SP / SSx. Predicted change in Y per unit of X.",
    "a": "Intercept = mean Y − b·mean X. Predicted Y at X = 0.",
    "R²": "Share of the variation in Y accounted for by the line (r squared).",
    "Std. error": "Standard error of the estimate = sqrt(Σ(Y − Y')² / (n − 2)).",
    "Interpolation": "Predicting Y for an X inside the observed range of X.",
    "Extrapolation": "Predicting Y for an X outside the observed range of X.",
    "Homoscedasticity": "Residual variance is constant across predictions (assumed, not computed).",
}
