"""
App de validação, cálculo de DV e formatação de CNPJ alfanumérico.
"""
