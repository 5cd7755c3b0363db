"""Specific-locale table used as the region database for the country catalog.

Each identifier is ``language_TERRITORY`` for a locale that carries a
Windows LCID.  Several locales share a territory (``en_US`` and ``es_US``);
the catalog keeps one row per territory.  Only the territory part matters
for the catalog, but the table is kept at locale granularity so that it can
be compared against the host's own locale list.

The set intentionally leaves out territories that would share a calling
code with an existing entry beyond the +1 and +7 zones (for example ``GG``
and ``JE`` under +44).
"""
from __future__ import annotations

SPECIFIC_LOCALES: tuple[str, ...] = (
    "af_ZA", "am_ET", "ar_AE", "ar_BH", "ar_DZ", "ar_EG", "ar_IQ", "ar_JO",
    "ar_KW", "ar_LB", "ar_LY", "ar_MA", "ar_OM", "ar_QA", "ar_SA", "ar_SY",
    "ar_TN", "ar_YE", "arn_CL", "as_IN", "az_AZ",
    "ba_RU", "be_BY", "bg_BG", "bn_IN", "bo_BT", "bo_CN", "br_FR", "bs_BA",
    "ca_ES", "co_FR", "cs_CZ", "cy_GB",
    "da_DK", "de_AT", "de_CH", "de_DE", "de_LI", "de_LU", "dsb_DE", "dv_MV",
    "el_GR", "en_AU", "en_BZ", "en_CA", "en_GB", "en_IE", "en_IN", "en_JM",
    "en_MY", "en_NZ", "en_PH", "en_TT", "en_US", "en_ZA", "en_ZW", "es_AR",
    "es_BO", "es_CL", "es_CO", "es_CR", "es_CU", "es_DO", "es_EC", "es_ES",
    "es_GT", "es_HN", "es_MX", "es_NI", "es_PA", "es_PE", "es_PR", "es_PY",
    "es_SV", "es_US", "es_UY", "es_VE", "et_EE", "eu_ES",
    "fa_IR", "fi_FI", "fil_PH", "fo_FO", "fr_BE", "fr_CA", "fr_CD", "fr_CH",
    "fr_CI", "fr_CM", "fr_FR", "fr_HT", "fr_LU", "fr_MC", "fr_ML", "fr_RE",
    "fy_NL",
    "ga_IE", "gl_ES", "gsw_FR", "gu_IN",
    "ha_NG", "he_IL", "hi_IN", "hr_BA", "hr_HR", "hsb_DE", "hu_HU", "hy_AM",
    "id_ID", "ii_CN", "is_IS", "it_CH", "it_IT", "iu_CA",
    "ja_JP",
    "ka_GE", "kk_KZ", "kl_GL", "km_KH", "kn_IN", "ko_KR", "kok_IN", "ky_KG",
    "lb_LU", "lo_LA", "lt_LT", "lv_LV",
    "mi_NZ", "mk_MK", "ml_IN", "mn_CN", "mn_MN", "moh_CA", "mr_IN", "ms_BN",
    "ms_MY", "mt_MT", "my_MM",
    "nb_NO", "ne_NP", "nl_BE", "nl_NL", "nn_NO", "nso_ZA",
    "oc_FR", "or_IN",
    "pa_IN", "pl_PL", "prs_AF", "ps_AF", "pt_BR", "pt_PT",
    "qut_GT", "quz_BO", "quz_EC", "quz_PE",
    "rm_CH", "ro_MD", "ro_RO", "ru_MD", "ru_RU", "rw_RW",
    "sa_IN", "sah_RU", "se_FI", "se_NO", "se_SE", "si_LK", "sk_SK", "sl_SI",
    "sma_NO", "sma_SE", "smj_NO", "smj_SE", "smn_FI", "sms_FI", "so_SO", "sq_AL",
    "sr_BA", "sr_ME", "sr_RS", "sv_FI", "sv_SE", "sw_KE", "syr_SY",
    "ta_IN", "te_IN", "tg_TJ", "th_TH", "ti_ER", "tk_TM", "tn_ZA", "tr_TR",
    "tt_RU", "tzm_DZ",
    "ug_CN", "uk_UA", "ur_IN", "ur_PK", "uz_UZ",
    "vi_VN",
    "wo_SN",
    "xh_ZA",
    "yo_NG",
    "zh_CN", "zh_HK", "zh_MO", "zh_SG", "zh_TW", "zu_ZA",
)
