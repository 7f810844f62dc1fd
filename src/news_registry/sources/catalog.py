#!/usr/bin/env python3
"""
Curated news source catalog.

Declaration order matters: it is the iteration order of the registry and
the precedence used when attributing a URL to a source.
"""

from typing import Tuple

from .base import SourceRecord


DEFAULT_SOURCES: Tuple[SourceRecord, ...] = (
    # Chile - Mainstream
    SourceRecord('El Mercurio', 'emol.com', 'CL', 'mainstream'),
    SourceRecord('La Tercera', 'latercera.com', 'CL', 'mainstream'),
    SourceRecord('CNN Chile', 'cnnchile.com', 'CL', 'mainstream'),
    SourceRecord('Radio Biobío', 'biobiochile.cl', 'CL', 'mainstream'),
    SourceRecord('CIPER Chile', 'ciperchile.cl', 'CL', 'investigative'),
    SourceRecord('El Ciudadano', 'elciudadano.com', 'CL', 'opinion'),
    SourceRecord('24 Horas', '24horas.cl', 'CL', 'public'),
    SourceRecord('Diario Financiero', 'df.cl', 'CL', 'financial'),
    
    # Global
    SourceRecord('BBC', 'bbc.com', 'UK', 'global'),
    SourceRecord('Reuters', 'reuters.com', 'UK', 'global'),
    SourceRecord('AP News', 'apnews.com', 'US', 'global'),
    SourceRecord('Al Jazeera', 'aljazeera.com', 'QA', 'global'),
    
    # Europe West
    SourceRecord('Deutsche Welle', 'dw.com', 'DE', 'europe_west'),
    SourceRecord('Le Monde', 'lemonde.fr', 'FR', 'europe_west'),
    SourceRecord('El País', 'elpais.com', 'ES', 'europe_west'),
    
    # Europe East
    SourceRecord('Polskie Radio', 'polskieradio.pl', 'PL', 'europe_east'),
    SourceRecord('Ukrainska Pravda', 'pravda.com.ua', 'UA', 'europe_east'),
    
    # Asia
    SourceRecord('South China Morning Post', 'scmp.com', 'HK', 'asia'),
    SourceRecord('Xinhua', 'xinhuanet.com', 'CN', 'asia'),
    SourceRecord('The Japan Times', 'japantimes.co.jp', 'JP', 'asia'),
    SourceRecord('The Hindu', 'thehindu.com', 'IN', 'asia'),
    
    # Financial Global
    SourceRecord('Financial Times', 'ft.com', 'UK', 'financial_global'),
    SourceRecord('The Economist', 'economist.com', 'UK', 'analysis'),
)
